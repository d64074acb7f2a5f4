"""Pydantic models describing the reconciler API payloads."""

from __future__ import annotations

from datetime import timedelta  # noqa: TC003
from logging import getLogger

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    JsonValue,
    StrictInt,
    StrictStr,
    TypeAdapter,
)

from reconciler_client.domain.durations import parse_duration
from reconciler_client.domain.status import ReconciliationStatus, classify_status

log = getLogger(__name__)


class ReconcilerBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    def to_payload(self) -> dict[str, object]:
        """Serialise using the wire field names."""

        return self.model_dump(mode="json", by_alias=True)


class RuntimeInput(ReconcilerBaseModel):
    name: str
    description: str = ""


class Configuration(ReconcilerBaseModel):
    key: str
    value: JsonValue = None
    secret: bool = False


class Component(ReconcilerBaseModel):
    component: str
    namespace: str = ""
    url: str | None = Field(default=None, alias="URL")
    configuration: tuple[Configuration, ...] = ()


class KymaConfig(ReconcilerBaseModel):
    version: str
    profile: str = ""
    components: tuple[Component, ...] = ()
    administrators: tuple[str, ...] = ()


class Metadata(ReconcilerBaseModel):
    global_account_id: str = Field(default="", alias="globalAccountID")
    sub_account_id: str = Field(default="", alias="subAccountID")
    service_id: str = Field(default="", alias="serviceID")
    service_plan_id: str = Field(default="", alias="servicePlanID")
    service_plan_name: str = Field(default="", alias="servicePlanName")
    shoot_name: str = Field(default="", alias="shootName")
    instance_id: str = Field(default="", alias="instanceID")
    region: str = ""


class Cluster(ReconcilerBaseModel):
    """Desired state submitted to the reconciler for one runtime."""

    cluster: str
    runtime_input: RuntimeInput = Field(alias="runtimeInput")
    kyma_config: KymaConfig = Field(alias="kymaConfig")
    metadata: Metadata = Field(default_factory=Metadata)
    kubeconfig: str = Field(default="", repr=False)


class State(ReconcilerBaseModel):
    """Status of one configuration version of a cluster, as reported by the service.

    Fields are strict so the values match the response exactly; a version sent as
    a string or float fails validation instead of being coerced.
    """

    cluster: StrictStr
    cluster_version: StrictInt = Field(alias="clusterVersion")
    configuration_version: StrictInt = Field(alias="configurationVersion")
    status: StrictStr
    status_url: StrictStr = Field(default="", alias="statusUrl")

    @property
    def reconciliation_status(self) -> ReconciliationStatus:
        return classify_status(self.status)


class StatusChange(ReconcilerBaseModel):
    status: StrictStr | None = None
    duration: StrictStr = ""

    @property
    def reconciliation_status(self) -> ReconciliationStatus:
        return classify_status(self.status)

    @property
    def elapsed(self) -> timedelta | None:
        """Time spent in ``status``.

        ``None`` when the service sent no duration or one that is not a valid
        duration string; the raw value stays available as ``duration``.
        """

        if not self.duration.strip():
            return None
        try:
            return parse_duration(self.duration)
        except ValueError:
            log.debug("Unparseable status change duration %r", self.duration)
            return None


StatusChangeList = TypeAdapter(list[StatusChange])

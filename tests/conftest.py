from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from reconciler_client.adapters.reconciler import Cluster
from reconciler_client.config import ReconcilerConfig

if TYPE_CHECKING:
    from collections.abc import Callable

CLUSTER_JSON = Path(__file__).resolve().parent / "data" / "cluster.json"
RECONCILER_URL = "http://reconciler.test:8080"


@pytest.fixture
def reconciler_config() -> ReconcilerConfig:
    return ReconcilerConfig(url=RECONCILER_URL)


@pytest.fixture(scope="session")
def cluster_payload() -> dict[str, object]:
    with CLUSTER_JSON.open(encoding="utf-8") as handle:
        return json.load(handle)


@pytest.fixture
def make_cluster(cluster_payload: dict[str, object]) -> Callable[[str, int], Cluster]:
    def factory(cluster_id: str, cluster_version: int) -> Cluster:
        cluster = Cluster.model_validate(cluster_payload)
        return cluster.model_copy(
            update={
                "cluster": cluster_id,
                "runtime_input": cluster.runtime_input.model_copy(
                    update={"name": f"runtimeName{cluster_version}"}
                ),
                "metadata": cluster.metadata.model_copy(
                    update={"global_account_id": f"globalAccountId{cluster_version}"}
                ),
                "kyma_config": cluster.kyma_config.model_copy(
                    update={
                        "profile": f"kymaProfile{cluster_version}",
                        "version": f"kymaVersion{cluster_version}",
                    }
                ),
                "kubeconfig": "fake kubeconfig",
            }
        )

    return factory

"""Cluster listing models.

The wire names (cluster_id, cluster_name, spark_version) are accepted as
validation aliases; the summary itself uses the local names.
"""

from pydantic import Field, field_validator

from .base import ProbeBaseModel

RUNNING_STATE = "RUNNING"


class ClusterSummary(ProbeBaseModel):
    """One row of the cluster listing.

    Every field is optional: a record missing one of the projected fields
    still yields a row, with that column left empty. `state` is passed
    through as-is (RUNNING, TERMINATED, PENDING, ...).
    """

    id: str | None = Field(default=None, validation_alias="cluster_id")
    name: str | None = Field(default=None, validation_alias="cluster_name")
    state: str | None = None
    runtime_version: str | None = Field(default=None, validation_alias="spark_version")

    @property
    def is_running(self) -> bool:
        return self.state == RUNNING_STATE


class ClusterListResponse(ProbeBaseModel):
    """Body of GET /api/2.0/clusters/list.

    The workspace omits `clusters` entirely when there are none. The paging
    fields are only read to detect truncation.
    """

    clusters: list[ClusterSummary] = Field(default_factory=list)
    next_page_token: str | None = None
    has_more: bool | None = None

    @field_validator("clusters", mode="before")
    @classmethod
    def null_clusters_is_empty(cls, v: object) -> object:
        return [] if v is None else v

    @property
    def has_further_pages(self) -> bool:
        return bool(self.next_page_token) or bool(self.has_more)

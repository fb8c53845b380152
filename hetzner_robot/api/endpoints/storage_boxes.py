"""Storage box and snapshot endpoints."""

from hetzner_robot.api.endpoints.base import EndpointGroup
from hetzner_robot.api.http_client import PendingResult
from hetzner_robot.core.validation import require

STORAGE_BOX_ID_MISSING = "Storage box ID is missing."


class StorageBoxEndpoints(EndpointGroup):
    """Endpoints addressing storage boxes by their numeric ID."""

    def query_storage_boxes(self) -> PendingResult:
        """List all storage boxes."""
        return self._http.request("GET", "/storagebox")

    def query_storage_box(self, storage_box_id: int | str) -> PendingResult:
        """Get a single storage box."""
        require(storage_box_id, STORAGE_BOX_ID_MISSING)
        return self._http.request("GET", f"/storagebox/{storage_box_id}")

    def update_storage_box_name(self, storage_box_id: int | str, new_name: str) -> PendingResult:
        """
        Rename a storage box.

        Args:
            storage_box_id: Storage box ID.
            new_name: New display name.
        """
        require(storage_box_id, STORAGE_BOX_ID_MISSING)
        require(new_name, "New storage box name is missing.")
        return self._http.request(
            "POST",
            f"/storagebox/{storage_box_id}",
            data={"storagebox_name": new_name},
        )

    def query_storage_box_snapshots(self, storage_box_id: int | str) -> PendingResult:
        """List the snapshots of a storage box."""
        require(storage_box_id, STORAGE_BOX_ID_MISSING)
        return self._http.request("GET", f"/storagebox/{storage_box_id}/snapshot")

    def create_storage_box_snapshot(self, storage_box_id: int | str) -> PendingResult:
        require(storage_box_id, STORAGE_BOX_ID_MISSING)
        return self._http.request("POST", f"/storagebox/{storage_box_id}/snapshot")

    def remove_storage_box_snapshot(
        self, storage_box_id: int | str, snapshot_name: str
    ) -> PendingResult:
        """Delete a snapshot by name."""
        require(storage_box_id, STORAGE_BOX_ID_MISSING)
        require(snapshot_name, "Snapshot name is missing.")
        return self._http.request(
            "DELETE",
            f"/storagebox/{storage_box_id}/snapshot/{snapshot_name}",
        )

from sqlwhitelist.cloud.provider_base import InstanceStateClient
from sqlwhitelist.types import AuthorizedNetworks, Operation
from googleapiclient import discovery
from googleapiclient.errors import HttpError
from google.oauth2.credentials import Credentials
from typing import Optional
import time


class CloudSQLProvider(InstanceStateClient):
    def __init__(self, project: str, instance: str, token: str, api_version: str = "v1beta4"):
        """
        Client for reading and replacing the authorized networks of one Cloud SQL instance.
        The bearer token comes from gcloud, so no service account file is needed.
        """
        self.project = project
        self.instance = instance
        self.sqladmin = discovery.build(
            'sqladmin',
            api_version,
            credentials=Credentials(token=token),
            cache_discovery=False
        )

    def get_authorized_networks(self) -> Optional[AuthorizedNetworks]:
        """
        Fetch settings.ipConfiguration.authorizedNetworks for the instance.
        Returns None if the call fails or the instance has no such list.
        """
        print(f"⏳ Getting current whitelisted IP addresses for {self.project}/{self.instance}...")
        try:
            response = self.sqladmin.instances().get(
                project=self.project,
                instance=self.instance,
                fields="settings"
            ).execute()
        except HttpError as e:
            print(f"❌ Failed to fetch instance settings: {e}")
            return None

        networks = (response or {}).get("settings", {}).get("ipConfiguration", {}).get("authorizedNetworks")
        if networks is None:
            print("❌ Instance settings have no authorized networks list.")
            return None

        print(f"✅ Found {len(networks)} whitelisted IP address(es).")
        return networks

    def set_authorized_networks(self, entries: AuthorizedNetworks) -> Optional[Operation]:
        """
        Replace the whole authorized network list in a single PATCH.
        Returns the Cloud SQL operation on success, None otherwise.
        """
        print("⏳ Updating whitelisted IP addresses...")
        body = {
            "settings": {
                "ipConfiguration": {
                    "authorizedNetworks": entries
                }
            }
        }
        try:
            op = self.sqladmin.instances().patch(
                project=self.project,
                instance=self.instance,
                body=body
            ).execute()
        except HttpError as e:
            print(f"❌ Update request failed: {e}")
            return None

        if op is None:
            print("❌ Update request returned no response.")
            return None
        print("✅ Update request accepted.")
        return op

    def wait_for_operation(self, operation: Operation, poll_interval: float = 2):
        operation_name = operation["name"]
        print(f"⏳ Waiting for operation {operation_name} to complete...")
        while True:
            result = self.sqladmin.operations().get(
                project=self.project,
                operation=operation_name
            ).execute()

            if result.get("status") == "DONE":
                if "error" in result:
                    raise Exception(f"❌ Operation failed: {result['error']}")
                print("✅ Operation completed.")
                break
            time.sleep(poll_interval)

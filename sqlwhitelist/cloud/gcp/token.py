import subprocess
from sqlwhitelist.cloud.provider_base import TokenSource


class GcloudTokenSource(TokenSource):
    def __init__(self, gcloud="gcloud"):
        self.gcloud = gcloud

    def get_token(self):
        """
        Read a bearer token from an already authenticated gcloud CLI.
        Returns None if gcloud is missing, fails, or prints nothing.
        """
        print("⏳ Getting access token...")
        try:
            result = subprocess.run(
                [self.gcloud, 'auth', 'print-access-token'],
                capture_output=True, text=True, check=True
            )
        except FileNotFoundError:
            print(f"❌ '{self.gcloud}' not found. Install and configure gcloud.")
            return None
        except subprocess.CalledProcessError as e:
            print(f"❌ Configure gcloud: {e.stderr.strip() if e.stderr else e}")
            return None

        token = result.stdout.strip()
        if not token:
            print("❌ Configure gcloud: no access token returned.")
            return None

        print("✅ Access token acquired.")
        return token

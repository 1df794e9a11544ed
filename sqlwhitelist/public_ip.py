import ipaddress
import requests
from sqlwhitelist.cloud.provider_base import PublicIpSource

IPIFY_URL = "https://api.ipify.org"


class IpifyPublicIpSource(PublicIpSource):
    def __init__(self, url=IPIFY_URL, timeout=10):
        self.url = url
        self.timeout = timeout

    def get_ip(self):
        """
        Fetch the caller's public IPv4 address and return it as a /32 CIDR.
        """
        print("⏳ Getting current IP address...")
        try:
            response = requests.get(self.url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            print(f"❌ Failed to get public IP: {e}")
            return None

        ip = response.text.strip()
        if not ip:
            print("❌ Public IP service returned an empty response.")
            return None

        try:
            address = ipaddress.ip_address(ip)
        except ValueError:
            print(f"❌ Public IP service returned an invalid address: {ip!r}")
            return None
        # authorized networks here are single IPv4 hosts
        if address.version != 4:
            print(f"❌ {ip} is not an IPv4 address; only /32 entries are supported.")
            return None

        print(f"✅ Current IP address is {ip}")
        return f"{ip}/32"

import pytest
from sqlwhitelist.cloud.provider_base import InstanceStateClient, PublicIpSource, TokenSource


class FakeTokenSource(TokenSource):
    def __init__(self, token="tok"):
        self.token = token
        self.calls = 0

    def get_token(self):
        self.calls += 1
        return self.token


class FakeIpSource(PublicIpSource):
    def __init__(self, ip="5.6.7.8/32"):
        self.ip = ip
        self.calls = 0

    def get_ip(self):
        self.calls += 1
        return self.ip


class FakeInstanceClient(InstanceStateClient):
    def __init__(self, entries=None, patch_result=None):
        self.entries = entries
        self.patch_result = patch_result if patch_result is not None else {"name": "op-1"}
        self.get_calls = 0
        self.patches = []
        self.waited = []

    def get_authorized_networks(self):
        self.get_calls += 1
        return self.entries

    def set_authorized_networks(self, entries):
        self.patches.append(entries)
        return self.patch_result

    def wait_for_operation(self, operation):
        self.waited.append(operation)


@pytest.fixture
def office():
    return {"name": "office", "value": "9.9.9.9/32", "kind": "sql#aclEntry"}


class TokenSource:
    def get_token(self):
        raise NotImplementedError


class PublicIpSource:
    def get_ip(self):
        raise NotImplementedError


class InstanceStateClient:
    def get_authorized_networks(self):
        raise NotImplementedError

    def set_authorized_networks(self, entries):
        raise NotImplementedError

    def wait_for_operation(self, operation):
        raise NotImplementedError

from typing import List, TypedDict

class Config(TypedDict, total=False):
    projectId: str
    instanceId: str
    name: str

class AuthorizedNetworkEntry(TypedDict):
    kind: str
    value: str
    name: str

class Operation(TypedDict, total=False):
    name: str
    status: str
    error: dict

AuthorizedNetworks = List[AuthorizedNetworkEntry]

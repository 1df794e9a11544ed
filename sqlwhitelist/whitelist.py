import click
from typing import List, Optional
from sqlwhitelist.cloud.provider_base import InstanceStateClient
from sqlwhitelist.config import ConfigStore
from sqlwhitelist.prompts import Prompter
from sqlwhitelist.types import AuthorizedNetworkEntry, AuthorizedNetworks, Config

ACL_ENTRY_KIND = "sql#aclEntry"
NEW_VALUE = "NEW VALUE"


def resolve_name(config: Config, entries: AuthorizedNetworks, store: ConfigStore, prompter: Prompter) -> str:
    """
    Decide which named entry to update. A remembered name is reused on
    confirmation; otherwise the operator picks an existing name or types a
    new one, and the choice is remembered in the config file.
    """
    remembered = config.get("name")
    if remembered and prompter.confirm(f"Do you want to update {remembered}?"):
        return remembered

    names = [e["name"] for e in entries if e.get("name")]
    name = prompter.select("Which IP do you want to update?", [*names, NEW_VALUE])
    if name == NEW_VALUE:
        name = prompter.text("Enter new name")

    store.save({**config, "name": name})
    return name


def is_up_to_date(entries: AuthorizedNetworks, name: str, new_ip: str) -> bool:
    return any(e.get("name") == name and e.get("value") == new_ip for e in entries)


def build_authorized_networks(entries: AuthorizedNetworks, name: str, new_ip: str) -> List[AuthorizedNetworkEntry]:
    """
    Drop the entry being replaced (and any other entry already holding
    new_ip) and append the new entry at the end.
    """
    kept = [e for e in entries if e.get("value") != new_ip and e.get("name") != name]
    kept.append({"kind": ACL_ENTRY_KIND, "value": new_ip, "name": name})
    return kept


def update_ip(client: InstanceStateClient, name: str, new_ip: str, entries: AuthorizedNetworks,
              wait: bool = False) -> Optional[bool]:
    """
    Returns False when the IP was already whitelisted under name, True when
    it was updated and None on failure.
    """
    if is_up_to_date(entries, name, new_ip):
        click.secho(f"{name} IP is already up to date", fg="green")
        return False

    op = client.set_authorized_networks(build_authorized_networks(entries, name, new_ip))
    if op is None:
        return None
    if wait:
        client.wait_for_operation(op)

    click.secho(f"{name} IP has been successfully updated", fg="green")
    return True

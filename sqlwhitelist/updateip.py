#!/usr/bin/env python3

import os
import sys
import argparse
import click

from sqlwhitelist.cloud.gcp.provider import CloudSQLProvider
from sqlwhitelist.cloud.gcp.token import GcloudTokenSource
from sqlwhitelist.config import CONFIG_FILE, JsonFileConfigStore, resolve_config
from sqlwhitelist.prompts import ClickPrompter
from sqlwhitelist.public_ip import IPIFY_URL, IpifyPublicIpSource
from sqlwhitelist.whitelist import resolve_name, update_ip


def run(token_source, ip_source, store, prompter, client_factory, wait=False) -> bool:
    """
    Run one update end to end, stopping at the first failed step.
    client_factory(project_id, instance_id, token) builds the Cloud SQL client.
    Returns True if the IP ends up whitelisted, False otherwise.
    """
    token = token_source.get_token()
    if not token:
        return False

    new_ip = ip_source.get_ip()
    if not new_ip:
        return False

    config = resolve_config(store, prompter)
    client = client_factory(config.get("projectId", ""), config.get("instanceId", ""), token)

    entries = client.get_authorized_networks()
    if entries is None:
        return False

    name = resolve_name(config, entries, store, prompter)
    if not name:
        print("❌ Empty name")
        return False

    return update_ip(client, name, new_ip, entries, wait=wait) is not None


def main(argv=None):
    """
    Whitelist the current public IP on a Cloud SQL instance.
    Exits 0 when the IP is whitelisted (updated or already current), 1 otherwise.
    """
    parser = argparse.ArgumentParser(description="Update a Cloud SQL authorized network with your current IP")
    parser.add_argument("--config", default=os.environ.get("SQL_WHITELIST_CONFIG", CONFIG_FILE),
                        help="Path of the JSON config file")
    parser.add_argument("--wait", action="store_true", help="Wait for the Cloud SQL operation to finish")
    parser.add_argument("--ip-service", default=os.environ.get("SQL_WHITELIST_IP_SERVICE", IPIFY_URL),
                        help="URL returning the caller's public IP as plain text")
    parser.add_argument("--gcloud", default=os.environ.get("SQL_WHITELIST_GCLOUD", "gcloud"),
                        help="gcloud executable used to print the access token")
    parser.add_argument("--api-version", default="v1beta4", help="Cloud SQL Admin API version")
    args = parser.parse_args(argv)

    def client_factory(project_id, instance_id, token):
        return CloudSQLProvider(project_id, instance_id, token, api_version=args.api_version)

    try:
        ok = run(
            token_source=GcloudTokenSource(args.gcloud),
            ip_source=IpifyPublicIpSource(args.ip_service),
            store=JsonFileConfigStore(args.config),
            prompter=ClickPrompter(),
            client_factory=client_factory,
            wait=args.wait,
        )
    except click.Abort:
        print("\n❌ Aborted")
        ok = False
    except Exception as e:
        print(f"❌ {e}")
        ok = False

    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()

import json
from pathlib import Path
from sqlwhitelist.prompts import Prompter
from sqlwhitelist.types import Config

CONFIG_FILE = "config.json"


class ConfigStore:
    def load(self) -> Config:
        raise NotImplementedError

    def save(self, config: Config) -> None:
        raise NotImplementedError


class JsonFileConfigStore(ConfigStore):
    def __init__(self, path=CONFIG_FILE):
        self.path = Path(path)

    def load(self) -> Config:
        """
        Read the config file. Raises OSError if it cannot be read and
        ValueError if it is not a JSON object.
        """
        with open(self.path) as f:
            config = json.load(f)
        if not isinstance(config, dict):
            raise ValueError(f"{self.path} does not contain a JSON object")
        return config

    def save(self, config: Config) -> None:
        with open(self.path, "w") as f:
            json.dump(config, f, indent=2)


class InMemoryConfigStore(ConfigStore):
    def __init__(self, initial=None):
        self.config = dict(initial) if initial is not None else None
        self.saves = 0

    def load(self) -> Config:
        if self.config is None:
            raise FileNotFoundError("no config stored")
        return dict(self.config)

    def save(self, config: Config) -> None:
        self.config = dict(config)
        self.saves += 1


def resolve_config(store: ConfigStore, prompter: Prompter) -> Config:
    """
    Reuse the stored project/instance if the operator confirms it, otherwise
    ask for both and write them back over whatever was stored.
    """
    config = {}
    try:
        config = store.load()
        print(f"PROJECT ID:   {config.get('projectId')}")
        print(f"INSTANCE ID:  {config.get('instanceId')}")
        if prompter.confirm("Do you want to use this config?"):
            return config
    except (OSError, ValueError) as e:
        print(f"⚠️ No usable config ({e}), please enter it.")

    project_id = prompter.text("Enter project id")
    instance_id = prompter.text("Enter instance id")
    config = {**config, "projectId": project_id, "instanceId": instance_id}
    store.save(config)
    return config

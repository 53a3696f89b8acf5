from typing import Any

import yaml


class MultilineDumper(yaml.SafeDumper):
    pass


def _str_presenter(dumper, data):
    # Literal blocks keep multi-line text readable; single-line text stays inline.
    if "\n" in data.rstrip("\n"):
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", data)


MultilineDumper.add_representer(str, _str_presenter)


class YamlAdapter:
    def dump(self, data: Any) -> str:
        return yaml.dump(
            data,
            Dumper=MultilineDumper,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )

    def load(self, text: str) -> Any:
        return yaml.safe_load(text)

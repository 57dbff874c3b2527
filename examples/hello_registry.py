import logging
from dataclasses import dataclass

import singleton_registry


@dataclass
class Settings:
    url: str = "http://127.0.0.1:8000"


class Client:
    def __init__(self, settings: Settings) -> None:
        self.settings = settings


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    reg = singleton_registry.root()
    reg.remember(Settings)
    settings = reg.make(singleton_registry.type_name(Settings))

    # Named entry, read back through the remembered fallback name.
    reg.remember(lambda: Client(settings), "client")
    client = reg.make()
    print(client.settings.url)

    # Scoped registries do not see the shared entries.
    scratch = singleton_registry.local()
    print(scratch.make("client"))


if __name__ == "__main__":
    main()

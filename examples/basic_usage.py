"""Basic Multimap Usage Example.

This example demonstrates both map variants: an ArrayMap keeping every
value in insertion order and a SetMap keeping unique values, plus building
a map from YAML configuration.

Usage:
    python basic_usage.py
"""

import logging

from multimaps import (
    ArrayMap,
    MultiMapConfig,
    SetMap,
    configure_logging,
    create_multi_map,
)


def array_map_demo() -> None:
    print("--- ArrayMap ---")
    history = ArrayMap(name="history")

    history.push("alice", "login", "view", "logout")
    history.push("bob", "login")
    history.unshift("bob", "signup")
    print(f"bob: {history.get('bob')}")

    last = history.pop("alice")
    print(f"Popped last action of alice: {last}")

    history.sort("alice")
    print(f"alice sorted: {history.get('alice')}")

    print(f"Keys: {history.size}, actions: {history.flat_size}")
    for user, action in history.flat_entries():
        print(f"  {user} -> {action}")

    # Mutators create the key even when there is nothing to remove
    print(f"shift on carol: {history.shift('carol')}, has carol: {history.has('carol')}")


def set_map_demo() -> None:
    print("\n--- SetMap ---")
    roles = SetMap(name="roles")

    roles.add("alice", "admin", "editor")
    roles.add("alice", "admin")
    roles.add("bob", "viewer")
    print(f"alice roles: {sorted(roles.get('alice'))}")

    roles.delete_in("alice", "editor")
    print(f"alice after delete_in: {sorted(roles.get('alice'))}")

    roles.for_each(lambda values, user, _: print(f"  {user}: {len(values)} role(s)"))


def config_demo() -> None:
    print("\n--- Configuration ---")
    config = MultiMapConfig.from_yaml_string(
        """
multimap:
  name: tags
  value_collection_type: set
"""
    )
    tags = create_multi_map(config)
    tags.add("article1", "python", "python", "maps")
    print(f"{tags!r}")


def main():
    configure_logging(level=logging.DEBUG)
    array_map_demo()
    set_map_demo()
    config_demo()


if __name__ == "__main__":
    main()

"""Minimal example for KeyedSet using a dictionary item as the key."""

from keyed_set import KeyedSet, by_item


def main() -> None:
    """Run a basic add/delete/union flow on records keyed by id."""
    users = KeyedSet([{"id": 1, "name": "alice"}, {"id": 2, "name": "bob"}], serializer=by_item("id"))
    print(f"{users=}")

    users.add({"id": 1, "name": "alice smith"})
    print("after overwrite:", users.values())
    print("has id 2:", users.has({"id": 2}))

    users.delete({"id": 2})
    print("after delete:", users.values())


if __name__ == "__main__":
    main()

"""Set algebra between two KeyedSets sharing a serializer."""

from keyed_set import KeyedSet, json_key


def main() -> None:
    """Compare two inventories of unhashable records."""
    monday = KeyedSet([{"sku": "a", "qty": 1}, {"sku": "b", "qty": 2}], serializer=json_key)
    tuesday = KeyedSet([{"qty": 2, "sku": "b"}, {"sku": "c", "qty": 5}], serializer=json_key)

    print("both days:", monday.intersect(tuesday))
    print("only monday:", monday.complement(tuesday))
    print("either day:", monday.union(tuesday).values())
    print("monday within tuesday:", monday.is_subset_of(tuesday))


if __name__ == "__main__":
    main()

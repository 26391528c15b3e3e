"""Shows that replacing the serializer leaves stored keys alone until rekey()."""

from keyed_set import KeyedSet


def main() -> None:
    """Swap the serializer of a populated set, then re-key it."""
    words = KeyedSet(["apple", "avocado", "banana"])
    words.set_serializer(lambda word: word[0])
    print("keys after swap:", words.derived_keys())
    print("has 'apricot':", words.has("apricot"))

    words.rekey()
    print("keys after rekey:", words.derived_keys())
    print("values after rekey:", words.values())


if __name__ == "__main__":
    main()

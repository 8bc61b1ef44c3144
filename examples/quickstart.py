"""Quickstart example for transtree.

This example demonstrates basic usage of transtree: merging per-language
trees, translating with prefixes and counts, switching language, the
fallback language, debug mode, and completeness checks.

Note: Missing-translation warnings are logged from a background thread.
The example configures logging so they appear on stderr, and closes the
emitter at the end so every pending warning is written before exit.
"""

import logging

from transtree import DiagnosticsEmitter, Translator, merge

logging.basicConfig(level=logging.WARNING, format="%(message)s")

# Example 1: Building a catalog
print("=" * 50)
print("Example 1: Merging Per-Language Trees")
print("=" * 50)

catalog = merge([
    ("it", {
        "pear": "Pera",
        "banana": "Banana",
        "apple": ["Mela", "Mele", "Nessuna mela"],
        "vegetable": {"root": {"carrot": "Carota"}},
        "sub": {"strawberry": ["1 fragola", "%n fragole", "0 fragole"]},
    }),
    ("en", {
        "pear": "Pear",
        "apple": ["Apple", "Apples", "No apples"],
        "vegetable": {"root": {"carrot": "Carrot"}},
        "sub": {"strawberry": ["1 strawberry", "%n strawberries", "0 strawberries"]},
    }),
])
print(catalog["pear"])
# Output: {'it': 'Pera', 'en': 'Pear'}

emitter = DiagnosticsEmitter()
translator = Translator(catalog, language="it", emitter=emitter)

# Example 2: Paths and prefixes
print("\n" + "=" * 50)
print("Example 2: Paths and Prefixes")
print("=" * 50)

print(translator.t("vegetable.root.carrot"))
# Output: Carota
print(translator.t("carrot", prefix="vegetable.root"))
# Output: Carota

roots = translator.with_prefix("vegetable.root")
print(roots("carrot"))
# Output: Carota

# Example 3: Plurals
print("\n" + "=" * 50)
print("Example 3: Plurals")
print("=" * 50)

for count in (0, 1, 10):
    print(translator.t("sub.strawberry", count=count))
# Output:
# 0 fragole
# 1 fragola
# 10 fragole

# Example 4: Switching language
print("\n" + "=" * 50)
print("Example 4: Switching Language")
print("=" * 50)

translator.subscribe(lambda old, new: print(f"language: {old} -> {new}"))
translator.set_language("en")
# Output: language: it -> en
print(translator.t("apple", count=3))
# Output: Apples

# Example 5: Missing translations and fallback
print("\n" + "=" * 50)
print("Example 5: Missing Translations and Fallback")
print("=" * 50)

print(translator.t("banana"))
# Output: banana
# (logged) [Translate] Missing id: banana in language 'en'

translator.fallback_language = "it"
print(translator.t("banana"))
# Output: Banana
# (logged) [Translate] Missing id: banana in language 'en', using fallback language 'it'

print(translator.t("kiwi", count=2, return_id_if_missing=False))
# Output: None

# Example 6: Debug mode
print("\n" + "=" * 50)
print("Example 6: Showing Ids")
print("=" * 50)

translator.show_ids = True
print(translator.t("apple", count=5))
# Output: apple (n. 5)
translator.show_ids = False

# Example 7: Completeness check
print("\n" + "=" * 50)
print("Example 7: Completeness Check")
print("=" * 50)

result = translator.check_missing_translations()
print(result.missing_paths)
# Output: {'en': ('banana',)}

emitter.close()

#!/usr/bin/env python3
"""
Example usage of jmap.

This script flattens a nested configuration, rebuilds it, walks its
canonical tree and stores the flat form in a primitive-only PriMap.
"""

import json
from jmap import (
    NormalizationError,
    PathCollector,
    PriMap,
    build,
    flatten,
    traverse,
    unflatten,
)


def main():
    """Main example function."""
    print("jmap Example")
    print("=" * 50)

    config = {
        "service": {
            "name": "billing",
            "port": 8080,
            "tags": ["internal", "payments"],
            "database": {
                "host": "db.local",
                "pool": {"min": 2, "max": 10}
            }
        },
        "debug": False
    }

    flat = flatten(config)
    print("\n📄 Flattened:")
    print(json.dumps(flat, indent=2))

    restored = unflatten(flat)
    print(f"\n🔁 Round trip equal: {restored == config}")

    shallow = flatten(config, max_depth=2)
    print("\n✂️  Flattened two levels deep:")
    for key, value in shallow.items():
        print(f"  {key} = {value!r}")

    collector = PathCollector()
    traverse(build(config), collector)
    print("\n🌳 Internal nodes:")
    for path in collector.paths:
        print(f"  /{'/'.join(path)}")

    primap = PriMap()
    try:
        primap.replace(flat)
    except NormalizationError as e:
        print(f"\n⚠️  {e} (stored as given)")
    print(f"📦 PriMap JSON: {primap.to_json()}")


if __name__ == "__main__":
    main()

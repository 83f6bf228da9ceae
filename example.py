#!/usr/bin/env python3
"""
Example usage of json-tree-hof.

This script demonstrates extracting, reordering and reshaping a small
outline stored as a JSON tree.
"""

import json
from functools import reduce
from json_tree_hof import JsonTreeHof, TreeConfig


def main():
    """Main example function."""
    print("JSON Tree HOF Example")
    print("=" * 50)

    outline = [
        {"id": 100, "name": "Introduction"},
        {
            "id": 101,
            "name": "Chapters",
            "nodes": [
                {"id": 102, "name": "Getting started"},
                {"id": 103, "name": "Advanced topics"}
            ]
        }
    ]

    jth = JsonTreeHof()

    print("\n🍃 Leaves:")
    for leaf in jth.leaves(outline):
        print(f"   • {leaf['name']}")

    print("\n📋 All names in pre-order:")
    print(f"   {jth.map_to_list(outline, lambda node: node['name'])}")

    total = reduce(lambda acc, n: acc + n, jth.map_to_list(outline, lambda node: node["id"]))
    print(f"\n➕ Sum of ids: {total}")

    print("\n⬆️  Moving 'Advanced topics' up:")
    moved = jth.move_up_by_id(outline, 103)
    print(json.dumps(moved, indent=2))

    print("\n✂️  Names only:")
    names_only = jth.map_nodes(outline, lambda node: {
        key: value for key, value in node.items() if key in ("name", "nodes")
    })
    print(json.dumps(names_only, indent=2))

    print("\n🔁 Same outline mapped in place:")
    in_place = JsonTreeHof(TreeConfig(in_place=True))
    in_place.move_down_by_id(outline, 102)
    print(f"   {[node['name'] for node in outline[1]['nodes']]}")


if __name__ == "__main__":
    main()

"""
This example demonstrates faceted filtering over a small product catalog with tagindex.

Each product is a value, each facet (outdoor, running, ...) is a tag. A TaggedIndex answers which products match a
combination of facets, and which facets a product carries.
"""

from tagindex import TaggedIndex


def main():
    # An index is a plain object, each instance is independent and takes no option
    catalog: TaggedIndex[str, str] = TaggedIndex()

    # assign() replaces every tag of a product, add() and remove() edit them one by one
    catalog.assign("trail shoes", ["outdoor", "running", "waterproof"])
    catalog.assign("road shoes", ["running"])
    catalog.assign("rain jacket", ["outdoor", "waterproof"])
    catalog.assign("yoga mat", ["indoor"])
    catalog.add("yoga mat", ["sale"])

    print(catalog.intersect(["running", "waterproof"]))  # ['trail shoes']
    print(catalog.union(["outdoor", "indoor"]))  # ['trail shoes', 'rain jacket', 'yoga mat']
    print(catalog.exact(["running"]))  # ['road shoes']
    print(catalog.difference("waterproof", ["running"]))  # ['rain jacket']
    print(catalog.complement("outdoor"))  # ['road shoes', 'yoga mat']

    # Products carrying exactly one of the facets, a product carrying both is left out
    print(catalog.symmetric_difference(["running", "outdoor"]))  # ['road shoes', 'rain jacket']

    # Deleting a tag removes it from every product, products left without tags leave the index
    catalog.delete_tag(["indoor", "sale"])
    print("yoga mat" in catalog)  # False
    print(catalog.statistics())  # {'tags': 3, 'values': 3, 'links': 6}


if __name__ == "__main__":
    main()

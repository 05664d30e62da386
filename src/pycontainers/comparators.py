""" Three-way comparators for the priority containers.

A comparator returns a negative number when the first argument has the higher
priority, zero when both share the same priority and a positive number otherwise.
"""
def min_comparator(base: any, other: any) -> int:
    # Ascending: lowest value at the head
    return (base > other) - (base < other)

def max_comparator(base: any, other: any) -> int:
    # Descending: highest value at the head
    return (base < other) - (base > other)

def key_comparator(key: callable, reverse: bool = False) -> callable:
    """ Builds a comparator that orders items by key(item).

    params:
        key (callable): Maps an item onto an orderable sort value.
        reverse (bool, opt): Places the highest sort value at the head instead of the lowest.

    returns:
        comparator (callable): The three-way comparator.
    """
    compare = max_comparator if reverse else min_comparator

    def comparator(base: any, other: any) -> int:
        return compare(key(base), key(other))

    return comparator

if __name__ == "__main__":
    pass

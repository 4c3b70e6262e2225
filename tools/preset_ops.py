# -*- coding: utf-8 -*-
from functools import reduce

# Mods are compared by display name only. Source and link ride along with
# whichever record is kept.

def names_of(mods):
    return {m["name"] for m in mods}

def unique_by_name(mods):
    """Drops later records whose name was already seen, keeping order."""
    seen = set()
    out = []
    for m in mods:
        if m["name"] in seen: continue
        seen.add(m["name"])
        out.append(m)
    return out

def union(a, b):
    return unique_by_name(list(a) + list(b))

def intersect(a, b):
    """Records of a whose name appears in b. Duplicates in a are left alone."""
    in_b = names_of(b)
    return [m for m in a if m["name"] in in_b]

def difference(a, b):
    in_b = names_of(b)
    return [m for m in a if m["name"] not in in_b]

def union_all(mod_lists):
    acc = []
    for mods in mod_lists: acc.extend(mods)
    return unique_by_name(acc)

def intersect_all(mod_lists):
    mod_lists = list(mod_lists)
    if not mod_lists: return []
    return reduce(intersect, mod_lists[1:], list(mod_lists[0]))

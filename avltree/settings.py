# Should keys be converted to strings before they are stored or looked up?
# With coercion on, `tree[1]` and `tree["1"]` refer to the same entry and keys
# of mixed types can share a tree, but keys sort lexicographically ("10" comes
# before "9"). Turn it off to store keys as given; they then need to be
# mutually comparable. An explicit `key=` passed to AVLTree always wins.
COERCE_KEYS = True

# Indentation added per tree level by `dump_tree`.
DUMP_INDENT = "  "

# Run the full height/balance self-check after every insert and delete. This
# turns every O(log n) mutation into an O(n) one, so it is only meant for
# debugging the tree itself.
CHECK_INVARIANTS = False

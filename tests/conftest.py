import sys

# Checking the larger proofs recurses through deeply nested terms.
sys.setrecursionlimit(max(sys.getrecursionlimit(), 10_000))

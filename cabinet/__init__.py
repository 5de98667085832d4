"""Describes the Cabinet domain. Centres around the `Controller`.

What is there?

- A fixed catalog of ingredients and recipes.
- The set of ingredients on hand.
- A rule that splits the recipes into the ones you can make and the ones you
  cannot.

The only invariant worth the name: the split is always derived from the
current cabinet. So it is recomputed in full after every event.
"""

"""Describes the recipe list domain. Centres around the `RecipeList`.

Why is this hard?

- It mostly isn't. The store publishes everything, the list decides what to
  show.
- The only interesting bit is the selection. It outlives visibility: pick a
  recipe, switch to favourites where it isn't, switch back and it is selected
  again.
- Nothing is diffed. Every snapshot and every mode change is recomputed from
  scratch and whoever renders can diff if they care.

Should be able to drive all of it without a browser.
"""

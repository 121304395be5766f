"""
Mealtime recommendation engine.

Responsibilities:
- Load the static catalog of food modes and content items.
- Filter the catalog to candidates, relaxing constraints in stages.
- Score candidates with an additive heuristic tuned for eating.
- Return exactly three ranked picks with a hero and rationale.
"""

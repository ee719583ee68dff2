"""Pure launcher logic: scoring, collections and query heuristics."""

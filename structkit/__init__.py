"""Classic data structures and algorithms: polynomials, expressions, sorting,
sparse matrices, CPU scheduling, queues, stacks, linked lists and trees."""

__version__ = "0.1.0"

__all__ = [
    "bivariate",
    "customers",
    "doubly_linked",
    "expressions",
    "gantt",
    "polynomial",
    "queues",
    "scheduling",
    "sorting",
    "sparse",
    "stacks",
    "timesharing",
    "trees",
]
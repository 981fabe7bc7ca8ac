"""Logic Auditor - Code review flashcards with a simulated audit step."""

__version__ = "0.1.0"

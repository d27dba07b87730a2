"""Staff records service: employee CRUD with an append-only audit history."""

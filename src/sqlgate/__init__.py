"""sqlgate: policy gate for SQL statements backed by an OPA decision point."""

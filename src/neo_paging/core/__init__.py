"""Core building blocks shared across neo-paging."""

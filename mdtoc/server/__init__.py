"""HTTP interface for table-of-contents generation."""

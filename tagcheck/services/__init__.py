"""tagcheck services package."""

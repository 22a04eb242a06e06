"""
Constants for flattening JSON documents into CSV tables.

This module defines configuration constants used throughout the conversion pipeline,
particularly for turning nested JSON structures into flat, row-aligned columns.

Usage Patterns:
    - Nested objects: contact.address.city → contact__address__city
    - Array fields: hobbies[0], hobbies[1] → hobbies (one row per element)
    - Arrays of objects: projects[1].title → projects__title (on the second row)

Example:
    Original nested structure:
    {
        "id": 3,
        "contact": {"email": "c@example.com"},
        "projects": [
            {"title": "A", "status": "done"},
            {"title": "B", "status": "wip"}
        ]
    }

    Flattened table:
    id | contact__email | projects__title | projects__status
    3  | c@example.com  | A               | done
       |                | B               | wip
"""

# Delimiter for separating nested object keys in flattened column names
# Example: {"contact": {"email": "j@e.com"}} → "contact__email"
NESTED_FIELD_DELIMITER = "__"

# Cell value written for a column that a row does not carry
MISSING_VALUE = ""

# Deepest object/array nesting accepted before a document is rejected.
# Each level costs a couple of interpreter frames while flattening.
MAX_NESTING_DEPTH = 256

JSON_FILE_EXTENSION = ".json"
CSV_FILE_EXTENSION = ".csv"

# Number of converted rows echoed back as sample data
SAMPLE_ROW_LIMIT = 5

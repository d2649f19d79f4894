"""Hello Worlds API.

A single greeting route plus best-effort connections to Redis and MongoDB.

Usage:
    ```
    hello-api                 # console script
    python -m hello_api.main  # same, without installing
    ```
"""

__version__ = "0.1.0"

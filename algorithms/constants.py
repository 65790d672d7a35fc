"""
Global constants used throughout the project
"""

import logging

LOG_FORMAT = "%(levelname)s | %(name)s | %(message)s"
DEFAULT_LOG_LEVEL = logging.INFO

# Seeds of the classical Fibonacci sequence: F(0), F(1)
FIBONACCI_START = 0
FIBONACCI_NEXT = 1

SORT_ALGORITHMS = ("bubble", "merge")
SEARCH_ALGORITHMS = ("linear", "binary", "range")
TRAVERSAL_ALGORITHMS = ("bfs", "dfs", "dfs-recursive")

# Separator between the two endpoints of an edge on the command line, e.g. 0:1
EDGE_SEPARATOR = ":"

"""
courserank

Rank courses in a prerequisite graph by how foundational they are.

Components:
- ranking: PageRank engine over the reversed prerequisite graph
- importer: CSV import/export for course and prerequisite data
- cli: Typer command-line front end
"""

__version__ = "0.1.0"

"""Issue Reaction Ranker.

Ranks the open issues of a GitHub repository by net community sentiment:
- every ``+1`` reaction adds a point, every ``-1`` reaction removes one
- other reactions (laugh, heart, confused, ...) are ignored
- pull requests are excluded from the ranking
"""

__version__ = "1.0.0"

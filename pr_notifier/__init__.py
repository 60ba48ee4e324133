"""Open pull request notifier.

Searches the repositories of a GitHub (or GitHub Enterprise) owner, collects
their open pull requests and posts a summary to a Slack channel:
- Repositories matched by a search query, archived ones excluded
- One page of open pull requests per repository
- A single webhook message per run, no state kept between runs
"""

__version__ = "1.0.0"

"""
LinkedIn-specific constants.
"""

# Paths relative to BASE_URL
LOGIN_PATH = "/"
SEARCH_PATH = "/jobs/search/"

# Pagination
JOBS_PER_PAGE = 25  # LinkedIn default

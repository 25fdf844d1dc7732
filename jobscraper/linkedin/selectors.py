"""
All CSS selectors used by the LinkedIn scraper.

LinkedIn serves different markup to signed-in and anonymous sessions, so
everything that differs is stored as a SelectorPair and resolved once per
navigation with `resolve`.
"""

from typing import Dict, NamedTuple


class SelectorPair(NamedTuple):
    authenticated: str
    anonymous: str

    def pick(self, logged_in: bool) -> str:
        return self.authenticated if logged_in else self.anonymous


def resolve(pairs: Dict[str, SelectorPair], logged_in: bool) -> Dict[str, str]:
    """Pick one selector per logical name for the current login state."""
    return {name: pair.pick(logged_in) for name, pair in pairs.items()}


# --- Login ---

EMAIL_INPUT_SELECTOR = "#login-email"
PASSWORD_INPUT_SELECTOR = "#login-password"
LOGIN_SUBMIT_SELECTOR = "#login-submit"
CAPTCHA_CHECKBOX_SELECTOR = ".recaptcha-checkbox-checkmark"

# Present only for signed-in sessions
PROFILE_PHOTO_SELECTOR = "img.nav-item__profile-member-photo"

# --- SERP (Search Results Page) ---

RESULTS_COUNT_SELECTOR = ".jobs-search-results__count-string"

JOB_LINK = SelectorPair(
    authenticated=".job-card-search__content-wrapper a.job-card-search__link-wrapper",
    anonymous="a.job-title-link",
)

NEXT_PAGE = SelectorPair(
    authenticated="button.next",
    anonymous="a.next-btn",
)

# --- Job Detail Page ---

VIEW_MORE_SELECTOR = "button.view-more-icon"

# Fields whose value is a list of nodes that get flattened into one string
LIST_FIELDS = ("industries", "jobFunctions")

DETAIL_FIELDS: Dict[str, SelectorPair] = {
    "title": SelectorPair(
        "h1.jobs-details-top-card__job-title",
        "h1.title",
    ),
    "company": SelectorPair(
        "a.jobs-details-top-card__company-url",
        "span.company",
    ),
    "location": SelectorPair(
        "h3.jobs-details-top-card__company-info span.jobs-details-top-card__bullet",
        "h3.location",
    ),
    "datePosted": SelectorPair(
        "p.jobs-details-top-card__job-info > span",
        ".posted",
    ),
    "description": SelectorPair(
        "div.jobs-description-content__text",
        ".summary",
    ),
    "seniorityLevel": SelectorPair(
        "p.js-formatted-exp-body",
        ".experience .rich-text",
    ),
    "industries": SelectorPair(
        "ul.js-formatted-industries-list li",
        ".industry .rich-text",
    ),
    "employmentType": SelectorPair(
        "p.js-formatted-employment-status-body",
        ".employment .rich-text",
    ),
    "jobFunctions": SelectorPair(
        "ul.js-formatted-job-functions-list li",
        ".function .rich-text",
    ),
}

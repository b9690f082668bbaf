from __future__ import annotations

__all__ = ["IDs", "page_button_id"]


class IDs:
    class Store:
        FILTER_CRITERIA = "filter-criteria"
        CURRENT_PAGE = "current-page-store"

    class Control:
        # Filters
        FILTER_GROUP_NAME = "filter-group-name"
        FILTER_NAME = "filter-name"
        FILTER_CODE = "filter-code"
        SEARCH_RESULTS = "search-results"

        # Stats (navbar)
        TOTAL_RECORDS = "total-records"
        FILTERED_RECORDS = "filtered-records"

        # Table
        TABLE_BODY = "table-body"
        TABLE_LOADING = "table-loading"

        # Pagination
        FIRST_PAGE = "first-page"
        PREV_PAGE = "prev-page"
        NEXT_PAGE = "next-page"
        LAST_PAGE = "last-page"
        PAGE_NUMBERS = "page-numbers"
        CURRENT_PAGE = "current-page"
        TOTAL_PAGES = "total-pages"

        # Export
        EXPORT_BTN = "export-btn"
        DOWNLOAD_EXPORT = "download-export"

    class Pattern:
        # pattern-matching "type" strings
        PAGE_BUTTON = "page-number-button"


def page_button_id(number: int) -> dict:
    return {"type": IDs.Pattern.PAGE_BUTTON, "index": number}

"""Client-side data model for the Telegra.ph publishing API.

Subpackages:
    content_model: Recursive page content tree (Node) with codec and validation
    records: Account, Page, PageList and PageViews records and request options
    telegraph_client: Thin HTTP transport returning decoded records
    cli: Command-line tool for content files and page lookups
"""

"""Page Rendering — pure functions producing the HTML bodies served by the app.

Invariants:
    - Index form posts to /gcd with text inputs named n and m
    - Result fragment embeds the divisor in <b>...</b>
"""

INDEX_PAGE = """
        <title>GCD Calculator</title>
        <form action="/gcd" method="post">
        <input type="text" name="n" />
        <input type="text" name="m" />
        <button type="submit">Compute GCD</button>
        </form>
"""


def render_index_page() -> str:
    return INDEX_PAGE


def render_gcd_result(n: int, m: int, divisor: int) -> str:
    """Result fragment for a successful computation."""
    return (
        f"The greatest common divisor of the numbers {n} and {m} "
        f"is <b>{divisor}</b>\n"
    )

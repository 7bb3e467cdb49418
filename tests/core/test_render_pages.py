"""Page Rendering — verifies the index form and result fragment markup."""

from gcd_app.core.render_pages import render_gcd_result, render_index_page


def test_index_page_posts_to_gcd_with_both_fields():
    page = render_index_page()
    assert '<form action="/gcd" method="post">' in page
    assert 'name="n"' in page
    assert 'name="m"' in page
    assert '<button type="submit">Compute GCD</button>' in page
    assert "<title>GCD Calculator</title>" in page


def test_result_fragment_format():
    assert render_gcd_result(48, 18, 6) == (
        "The greatest common divisor of the numbers 48 and 18 is <b>6</b>\n"
    )

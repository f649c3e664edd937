from grizzly.core.utils import render_html_safe


def test_keeps_article_markup():
    html = (
        '<p class="lead">Intro</p>'
        '<h2 id="setup">Setup</h2>'
        "<ul><li><strong>Fast</strong></li></ul>"
    )

    assert render_html_safe(html) == html


def test_strips_scripts_and_event_handlers():
    cleaned = render_html_safe(
        '<p onclick="steal()">Hi</p><script>alert(1)</script><iframe src="x"></iframe>',
    )

    assert "<script" not in cleaned
    assert "<iframe" not in cleaned
    assert "onclick" not in cleaned
    assert "<p>Hi</p>" in cleaned


def test_drops_javascript_links():
    cleaned = render_html_safe('<a href="javascript:alert(1)">click</a>')

    assert "javascript:" not in cleaned
    assert "click" in cleaned


def test_external_links_open_in_new_tab():
    cleaned = render_html_safe("<p>Read https://nextjs.org/docs first.</p>")

    assert 'href="https://nextjs.org/docs"' in cleaned
    assert 'target="_blank"' in cleaned
    assert 'rel="noopener nofollow"' in cleaned


def test_code_blocks_are_not_linkified():
    html = '<pre><code class="language-js">fetch("https://api.example.com")</code></pre>'

    cleaned = render_html_safe(html)

    assert "<a " not in cleaned
    assert 'class="language-js"' in cleaned

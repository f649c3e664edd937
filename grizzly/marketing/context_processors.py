from grizzly.marketing.forms import NewsletterForm


def newsletter_form(request):
    """Unbound newsletter form for the footer on every page."""
    return {"newsletter_form": NewsletterForm()}

"""
Marketing page views.

All content is static sample data; service categories come from the
shared ``CATEGORY_INFO`` mapping.
"""

from django.http import Http404, HttpRequest, HttpResponse
from django.shortcuts import render
from django.views.decorators.http import require_GET

from agency_schemas import (
    BUDGET_LABELS,
    CATEGORY_INFO,
    FIELD_LABELS,
    ServiceCategory,
    Timeline,
)
from agency_schemas.inquiry import (
    MESSAGE_MAX_LENGTH,
    MESSAGE_MIN_LENGTH,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
)

from apps.web.pages.content import (
    AWARDS,
    CONTACT_DETAILS,
    FEATURED_SERVICES,
    PROJECTS,
    TEAM,
    TESTIMONIALS,
    VALUES,
)

DEFAULT_CATEGORY = ServiceCategory.WEB_DEVELOPMENT


def _category_cards(
    categories: list[ServiceCategory] | None = None,
) -> list[dict[str, object]]:
    """Template-friendly (category, info) pairs, in enum order by default."""
    selected = categories if categories is not None else list(ServiceCategory)
    return [{"slug": c.value, "info": CATEGORY_INFO[c]} for c in selected]


@require_GET
def home(request: HttpRequest) -> HttpResponse:
    """
    GET /

    Hero, featured services, recent projects and testimonials.
    """
    return render(
        request,
        "pages/home.html",
        {
            "services": _category_cards(FEATURED_SERVICES),
            "projects": PROJECTS[:3],
            "testimonials": TESTIMONIALS,
        },
    )


@require_GET
def about(request: HttpRequest) -> HttpResponse:
    """GET /about/"""
    return render(
        request,
        "pages/about.html",
        {"team": TEAM, "values": VALUES, "awards": AWARDS},
    )


@require_GET
def services(request: HttpRequest) -> HttpResponse:
    """
    GET /services/

    All categories, with one expanded. ``?category=`` picks the expanded
    category; unknown values fall back to the default.
    """
    selected = (
        ServiceCategory.from_value(request.GET.get("category")) or DEFAULT_CATEGORY
    )
    return render(
        request,
        "pages/services.html",
        {
            "categories": _category_cards(),
            "selected": selected.value,
            "selected_info": CATEGORY_INFO[selected],
        },
    )


@require_GET
def service_detail(request: HttpRequest, category: str) -> HttpResponse:
    """
    GET /services/{category}/

    Detail page for one category, with related portfolio projects.
    """
    service = ServiceCategory.from_value(category)
    if service is None:
        raise Http404(f"Unknown service category '{category}'")

    related = [p for p in PROJECTS if service in p.categories]
    return render(
        request,
        "pages/service_detail.html",
        {
            "slug": service.value,
            "info": CATEGORY_INFO[service],
            "projects": related,
        },
    )


@require_GET
def portfolio(request: HttpRequest) -> HttpResponse:
    """GET /portfolio/"""
    projects = [
        {
            "project": project,
            "categories": [CATEGORY_INFO[c].title for c in project.categories],
        }
        for project in PROJECTS
    ]
    return render(request, "pages/portfolio.html", {"projects": projects})


@require_GET
def contact(request: HttpRequest) -> HttpResponse:
    """
    GET /contact/

    Contact form. ``?service=`` pre-selects a service category when it
    names a known category.
    """
    preselected = ServiceCategory.from_value(request.GET.get("service"))
    return render(
        request,
        "pages/contact.html",
        {
            "categories": _category_cards(),
            "selected": preselected.value if preselected else "",
            "budgets": [(b.value, label) for b, label in BUDGET_LABELS.items()],
            "timelines": [t.value for t in Timeline],
            "labels": FIELD_LABELS,
            "limits": {
                "name_min": NAME_MIN_LENGTH,
                "name_max": NAME_MAX_LENGTH,
                "message_min": MESSAGE_MIN_LENGTH,
                "message_max": MESSAGE_MAX_LENGTH,
            },
            "details": CONTACT_DETAILS,
        },
    )

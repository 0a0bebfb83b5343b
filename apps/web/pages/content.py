"""
Sample site content.

Static data rendered by the marketing pages. Service categories are not
listed here; pages read them from ``agency_schemas.CATEGORY_INFO``.
"""

from agency_schemas import ServiceCategory
from pydantic import BaseModel, Field

SITE_NAME = "Thompson Digital Solutions"


class Project(BaseModel):
    """A portfolio project."""

    title: str
    description: str
    technologies: list[str] = Field(default_factory=list)
    categories: list[ServiceCategory] = Field(default_factory=list)


class Testimonial(BaseModel):
    quote: str
    author: str
    role: str


class TeamMember(BaseModel):
    name: str
    role: str
    bio: str


class CompanyValue(BaseModel):
    title: str
    description: str


class Award(BaseModel):
    title: str
    organization: str
    year: int


class OfficeHours(BaseModel):
    days: str
    hours: str


class ContactDetails(BaseModel):
    email: str
    phone: str
    address_lines: list[str]
    hours: list[OfficeHours]


FEATURED_SERVICES: list[ServiceCategory] = [
    ServiceCategory.WEB_DEVELOPMENT,
    ServiceCategory.DIGITAL_STRATEGY,
    ServiceCategory.UX_DESIGN,
]

PROJECTS: list[Project] = [
    Project(
        title="E-commerce Platform",
        description="A modern e-commerce solution with seamless payment integration.",
        technologies=["Next.js", "Stripe", "Tailwind CSS"],
        categories=[ServiceCategory.WEB_DEVELOPMENT, ServiceCategory.UX_DESIGN],
    ),
    Project(
        title="Healthcare Portal",
        description="Secure patient management system for healthcare providers.",
        technologies=["React", "Node.js", "MongoDB"],
        categories=[ServiceCategory.WEB_DEVELOPMENT, ServiceCategory.CLOUD_SERVICES],
    ),
    Project(
        title="Real Estate App",
        description="Property listing and management platform with virtual tours.",
        technologies=["Vue.js", "Express", "PostgreSQL"],
        categories=[ServiceCategory.MOBILE_SOLUTIONS],
    ),
    Project(
        title="Wholesale Real Estate CRM",
        description=(
            "Real-time deal pipeline with dialer integration and reporting dashboards."
        ),
        technologies=["Salesforce", "Data Automations"],
        categories=[ServiceCategory.DIGITAL_STRATEGY],
    ),
    Project(
        title="Supply Chain Management Platform",
        description=(
            "End-to-end supply chain management with real-time tracking and analytics."
        ),
        technologies=["AWS", "Python", "Analytics"],
        categories=[ServiceCategory.CLOUD_SERVICES],
    ),
]

TESTIMONIALS: list[Testimonial] = [
    Testimonial(
        quote=(
            "Thompson Digital transformed our online presence. Their expertise "
            "and attention to detail exceeded our expectations."
        ),
        author="Sarah Johnson",
        role="CEO, TechStart Inc.",
    ),
    Testimonial(
        quote=(
            "Working with Thompson Digital was a game-changer for our business. "
            "They delivered a solution that perfectly matched our vision."
        ),
        author="Michael Chen",
        role="Founder, InnovateCo",
    ),
    Testimonial(
        quote=(
            "The team's technical expertise and project management made our "
            "digital transformation seamless and successful."
        ),
        author="Emily Rodriguez",
        role="CTO, FutureScale",
    ),
]

TEAM: list[TeamMember] = [
    TeamMember(
        name="Alex Thompson",
        role="Founder & CEO",
        bio=(
            "With over 15 years in digital technology, Alex founded Thompson "
            "Digital Solutions to help businesses thrive online."
        ),
    ),
    TeamMember(
        name="Maya Rodriguez",
        role="Creative Director",
        bio=(
            "Maya leads our design team, creating user-centered experiences "
            "that drive engagement and conversion."
        ),
    ),
    TeamMember(
        name="David Chen",
        role="Technical Director",
        bio=(
            "David oversees our development team and the architecture of "
            "everything we ship."
        ),
    ),
]

VALUES: list[CompanyValue] = [
    CompanyValue(
        title="Excellence",
        description=(
            "We strive for excellence in everything we do, from code quality "
            "to client communication."
        ),
    ),
    CompanyValue(
        title="Innovation",
        description="We embrace new technologies to solve complex problems creatively.",
    ),
    CompanyValue(
        title="Collaboration",
        description="The best results come from true partnership with our clients.",
    ),
    CompanyValue(
        title="Integrity",
        description="We operate with honesty, transparency and accountability.",
    ),
]

AWARDS: list[Award] = [
    Award(title="Best Digital Agency", organization="Web Excellence Awards", year=2023),
    Award(title="Innovation in Web Development", organization="Tech Innovators", year=2022),
    Award(title="UX Design Excellence", organization="Design Awards", year=2022),
    Award(title="Top 50 Fast-Growing Companies", organization="Business Weekly", year=2021),
]

CONTACT_DETAILS = ContactDetails(
    email="contact@thompson.digital",
    phone="1-800-THOMPSON",
    address_lines=["123 Tech Avenue", "San Francisco, CA 94105"],
    hours=[
        OfficeHours(days="Monday - Friday", hours="9:00 AM - 6:00 PM PST"),
        OfficeHours(days="Saturday", hours="By appointment"),
        OfficeHours(days="Sunday", hours="Closed"),
    ],
)

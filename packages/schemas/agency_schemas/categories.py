"""Service categories and their display metadata.

Every page that shows a category (cards, icons, titles, detail sections)
reads from ``CATEGORY_INFO``; there is no second lookup table.
"""

from enum import Enum

from pydantic import BaseModel, Field


class ServiceCategory(str, Enum):
    """Service offered by the agency."""

    WEB_DEVELOPMENT = "web-development"
    DIGITAL_STRATEGY = "digital-strategy"
    UX_DESIGN = "ux-design"
    MOBILE_SOLUTIONS = "mobile-solutions"
    CLOUD_SERVICES = "cloud-services"
    DIGITAL_MARKETING = "digital-marketing"

    @property
    def info(self) -> "CategoryInfo":
        return CATEGORY_INFO[self]

    @classmethod
    def from_value(cls, value: object) -> "ServiceCategory | None":
        """Exact lookup by wire value; None for anything else."""
        for category in cls:
            if category.value == value:
                return category
        return None


class Technology(BaseModel):
    """A technology used to deliver a service."""

    name: str
    description: str = ""


class CategoryInfo(BaseModel):
    """Display metadata for one service category."""

    title: str
    icon: str = Field(description="Icon identifier used by templates")
    description: str
    long_description: str = ""
    features: list[str] = Field(default_factory=list)
    technologies: list[Technology] = Field(default_factory=list)


CATEGORY_INFO: dict[ServiceCategory, CategoryInfo] = {
    ServiceCategory.WEB_DEVELOPMENT: CategoryInfo(
        title="Web Development",
        icon="code",
        description=(
            "Custom web applications built with modern technologies and best practices."
        ),
        long_description=(
            "We create scalable, high-performance web applications that drive "
            "business growth, built on proven frameworks and delivered with "
            "automated testing and deployment."
        ),
        features=[
            "Custom web application development",
            "Progressive Web Apps (PWA)",
            "E-commerce solutions",
            "Content Management Systems",
            "API development and integration",
            "Performance optimization",
        ],
        technologies=[
            Technology(name="React", description="Frontend development"),
            Technology(name="Next.js", description="Full-stack framework"),
            Technology(name="Node.js", description="Backend development"),
            Technology(name="TypeScript", description="Type-safe development"),
        ],
    ),
    ServiceCategory.DIGITAL_STRATEGY: CategoryInfo(
        title="Digital Strategy",
        icon="chart-bar",
        description=(
            "Strategic planning and consulting to maximize your digital potential."
        ),
        long_description=(
            "We help businesses navigate the digital landscape with strategies "
            "that align technology with business objectives."
        ),
        features=[
            "Digital transformation consulting",
            "Technology roadmap planning",
            "Competitive analysis",
            "Growth strategy",
        ],
        technologies=[
            Technology(name="Analytics Tools", description="Data analysis"),
            Technology(name="Project Management", description="Strategy execution"),
            Technology(name="Business Intelligence", description="Insights generation"),
        ],
    ),
    ServiceCategory.UX_DESIGN: CategoryInfo(
        title="UX/UI Design",
        icon="paint-brush",
        description="User-centered design that creates engaging digital experiences.",
        long_description=(
            "Research-driven interface design, from wireframes and prototypes "
            "to complete design systems."
        ),
        features=[
            "User research and testing",
            "Wireframing and prototyping",
            "Design systems",
            "Usability audits",
        ],
        technologies=[
            Technology(name="Figma", description="Design and prototyping"),
            Technology(name="Adobe Creative Suite", description="Visual design"),
            Technology(name="Prototyping Tools", description="Interactive mockups"),
        ],
    ),
    ServiceCategory.MOBILE_SOLUTIONS: CategoryInfo(
        title="Mobile Solutions",
        icon="device-phone-mobile",
        description="Native and cross-platform mobile applications.",
        long_description=(
            "Mobile apps for iOS and Android that feel native on every device."
        ),
        features=[
            "iOS and Android development",
            "Cross-platform apps",
            "App store deployment",
            "Mobile backend services",
        ],
        technologies=[
            Technology(name="React Native", description="Cross-platform development"),
            Technology(name="Swift", description="iOS development"),
            Technology(name="Kotlin", description="Android development"),
        ],
    ),
    ServiceCategory.CLOUD_SERVICES: CategoryInfo(
        title="Cloud Services",
        icon="cloud",
        description="Scalable cloud solutions for modern businesses.",
        long_description=(
            "Cloud architecture, migration and operations that scale with "
            "your traffic and your team."
        ),
        features=[
            "Cloud migration",
            "Infrastructure as code",
            "Serverless architecture",
            "Monitoring and cost optimization",
        ],
        technologies=[
            Technology(name="AWS", description="Cloud infrastructure"),
            Technology(name="Azure", description="Microsoft cloud"),
            Technology(name="Google Cloud", description="Google infrastructure"),
        ],
    ),
    ServiceCategory.DIGITAL_MARKETING: CategoryInfo(
        title="Digital Marketing",
        icon="chart-pie",
        description="Data-driven digital marketing strategies.",
        long_description=(
            "Search, content and campaign work measured against the numbers "
            "that matter to your business."
        ),
        features=[
            "Search engine optimization",
            "Content marketing",
            "Social media campaigns",
            "Conversion rate optimization",
        ],
        technologies=[
            Technology(name="Google Analytics", description="Performance tracking"),
            Technology(name="SEO Tools", description="Search optimization"),
            Technology(name="Marketing Automation", description="Campaign management"),
        ],
    ),
}


class Budget(str, Enum):
    """Budget bracket for a project."""

    RANGE_10K_25K = "10k-25k"
    RANGE_25K_50K = "25k-50k"
    RANGE_50K_100K = "50k-100k"
    RANGE_100K_PLUS = "100k+"

    @property
    def label(self) -> str:
        return BUDGET_LABELS[self]


BUDGET_LABELS: dict[Budget, str] = {
    Budget.RANGE_10K_25K: "$10,000 - $25,000",
    Budget.RANGE_25K_50K: "$25,000 - $50,000",
    Budget.RANGE_50K_100K: "$50,000 - $100,000",
    Budget.RANGE_100K_PLUS: "$100,000+",
}


class Timeline(str, Enum):
    """Expected project duration."""

    ONE_TO_THREE_MONTHS = "1-3 months"
    THREE_TO_SIX_MONTHS = "3-6 months"
    SIX_PLUS_MONTHS = "6+ months"

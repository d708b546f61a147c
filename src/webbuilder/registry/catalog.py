"""
Component Catalog
Default data and property-panel schemas for every component type.
"""

from typing import Any

from .types import ComponentCategory, ComponentDescriptor, ComponentType, FieldKind, FieldSpec

T = ComponentType
C = ComponentCategory


# ============================================================================
# Field helpers
# ============================================================================

def _f(name: str, label: str, kind: FieldKind = FieldKind.TEXT, default: Any = "", **extra: Any) -> FieldSpec:
    return FieldSpec(name=name, label=label, kind=kind, default=default, **extra)


def _color(name: str, label: str, default: str = "#ffffff") -> FieldSpec:
    return _f(name, label, FieldKind.COLOR, default)


def _flag(name: str, label: str, default: bool = False) -> FieldSpec:
    return _f(name, label, FieldKind.BOOLEAN, default)


def _number(name: str, label: str, default: int | float = 0) -> FieldSpec:
    return _f(name, label, FieldKind.NUMBER, default)


def _select(name: str, label: str, options: tuple[Any, ...], default: Any = None) -> FieldSpec:
    return _f(name, label, FieldKind.SELECT, options[0] if default is None else default, options=options)


def _strings(name: str, label: str, item_default: str) -> FieldSpec:
    return _f(name, label, FieldKind.STRING_LIST, [], item_default=item_default)


def _objects(name: str, label: str, item_fields: tuple[FieldSpec, ...], item_default: dict[str, Any]) -> FieldSpec:
    return _f(name, label, FieldKind.OBJECT_LIST, [], item_fields=item_fields, item_default=item_default)


_GAPS = ("none", "small", "normal", "large")
_ALIGN = ("left", "center", "right")
_SIZES = ("small", "medium", "large")

_IMG = "https://images.unsplash.com/photo-1460925895917-afdab827c52f"


# ============================================================================
# Layout
# ============================================================================

_LAYOUT = [
    ComponentDescriptor(
        type=T.HEADER,
        label="Header",
        category=C.LAYOUT,
        defaults={
            "logo": "WebBuilder",
            "links": ["Home", "About", "Services", "Products", "Blog", "Contact"],
            "bgColor": "#ffffff",
            "sticky": True,
        },
        fields=(
            _f("logo", "Logo text"),
            _strings("links", "Menu links", "New Link"),
            _color("bgColor", "Background color"),
            _f("logoImage", "Logo image (URL)", FieldKind.URL),
            _f("ctaButton", "CTA button text"),
        ),
    ),
    ComponentDescriptor(
        type=T.FOOTER,
        label="Footer",
        category=C.LAYOUT,
        defaults={
            "copyright": "© 2024 WebBuilder Plus. All rights reserved.",
            "links": ["Privacy", "Terms of Use", "Contact"],
            "facebook": "#",
            "twitter": "#",
            "instagram": "#",
            "linkedin": "#",
        },
        fields=(
            _f("copyright", "Copyright text"),
            _f("facebook", "Facebook", FieldKind.URL),
            _f("twitter", "Twitter", FieldKind.URL),
            _f("instagram", "Instagram", FieldKind.URL),
        ),
    ),
    ComponentDescriptor(
        type=T.DIVIDER,
        label="Divider",
        category=C.LAYOUT,
        defaults={"style": "line", "color": "#e5e7eb"},
        fields=(
            _select("style", "Style", ("line", "dashed", "dotted", "gradient")),
            _color("color", "Color", "#e5e7eb"),
        ),
    ),
    ComponentDescriptor(
        type=T.SPACER,
        label="Spacer",
        category=C.LAYOUT,
        defaults={"height": 60},
        fields=(_number("height", "Height (px)", 60),),
    ),
    ComponentDescriptor(
        type=T.CONTAINER,
        label="Container",
        category=C.LAYOUT,
        defaults={"maxWidth": "container", "padding": "normal", "bgColor": "#ffffff"},
        fields=(
            _select("maxWidth", "Max width", ("narrow", "container", "full"), "container"),
            _select("padding", "Padding", _GAPS, "normal"),
            _color("bgColor", "Background color"),
        ),
    ),
    ComponentDescriptor(
        type=T.COLUMNS,
        label="Columns",
        category=C.LAYOUT,
        defaults={
            "count": 2,
            "gap": "normal",
            "content": [
                {"title": "Left Column", "text": "Left column content..."},
                {"title": "Right Column", "text": "Right column content..."},
            ],
        },
        fields=(
            _select("count", "Columns", (2, 3, 4), 2),
            _select("gap", "Column gap", _GAPS, "normal"),
            _objects(
                "content",
                "Column content",
                (_f("title", "Title"), _f("text", "Text", FieldKind.TEXTAREA)),
                {"title": "New Column", "text": ""},
            ),
        ),
    ),
    ComponentDescriptor(
        type=T.ROW_2,
        label="2-Column Grid",
        category=C.LAYOUT,
        defaults={"gap": "normal"},
        fields=(_select("gap", "Column gap", _GAPS, "normal"),),
        in_palette=False,
    ),
    ComponentDescriptor(
        type=T.ROW_3,
        label="3-Column Grid",
        category=C.LAYOUT,
        defaults={"gap": "normal"},
        fields=(_select("gap", "Column gap", _GAPS, "normal"),),
        in_palette=False,
    ),
    ComponentDescriptor(
        type=T.ROW_4,
        label="4-Column Grid",
        category=C.LAYOUT,
        defaults={"gap": "normal"},
        fields=(_select("gap", "Column gap", _GAPS, "normal"),),
        in_palette=False,
    ),
    ComponentDescriptor(
        type=T.ROW_SIDEBAR,
        label="Content + Sidebar",
        category=C.LAYOUT,
        defaults={"layout": "sidebar-right", "gap": "normal"},
        fields=(
            _select("layout", "Sidebar position", ("sidebar-right", "sidebar-left")),
            _select("gap", "Column gap", _GAPS, "normal"),
        ),
        in_palette=False,
    ),
]


# ============================================================================
# Sections
# ============================================================================

_ITEM_TITLE_DESC = (
    _f("title", "Title"),
    _f("description", "Description"),
    _f("icon", "Icon"),
)

_SECTIONS = [
    ComponentDescriptor(
        type=T.HERO,
        label="Hero Section",
        category=C.SECTIONS,
        defaults={
            "title": "Make a Difference in the Digital World",
            "subtitle": "Take your business to the next level with modern, striking websites. "
                        "Professional design, fast delivery.",
            "cta": "Get Started Free",
            "ctaLink": "#",
            "secondaryCta": "Learn More",
            "image": f"{_IMG}?w=800",
            "gradientStart": "#3b82f6",
            "gradientEnd": "#8b5cf6",
        },
        fields=(
            _f("badge", "Badge"),
            _f("title", "Title"),
            _f("subtitle", "Subtitle", FieldKind.TEXTAREA),
            _f("cta", "Button text"),
            _f("ctaLink", "Button link", FieldKind.URL, "#"),
            _f("secondaryCta", "Secondary button text"),
            _flag("showPlayButton", "Show play button"),
            _color("gradientStart", "Gradient start", "#3b82f6"),
            _color("gradientEnd", "Gradient end", "#8b5cf6"),
            _flag("showTrustBadges", "Show trust badges"),
        ),
    ),
    ComponentDescriptor(
        type=T.CTA,
        label="Call to Action",
        category=C.SECTIONS,
        defaults={
            "title": "Ready to Bring Your Project to Life?",
            "subtitle": "Get in touch for a free consultation.",
            "buttonText": "Contact Us",
            "buttonLink": "#contact",
            "bgColor": "#3b82f6",
        },
        fields=(
            _f("title", "Title"),
            _f("subtitle", "Subtitle"),
            _f("buttonText", "Button text"),
            _color("bgColor", "Background color", "#3b82f6"),
        ),
    ),
    ComponentDescriptor(
        type=T.BANNER,
        label="Banner",
        category=C.SECTIONS,
        defaults={
            "text": "New year sale! 30% off all plans",
            "buttonText": "Explore",
            "bgColor": "#f59e0b",
        },
        fields=(
            _objects(
                "items",
                "Messages",
                (_f("icon", "Icon"), _f("text", "Text"), _f("link", "Link", FieldKind.URL)),
                {"icon": "", "text": "New message", "link": "#"},
            ),
            _color("bgColor", "Background color", "#f59e0b"),
            _color("bgColorEnd", "Gradient end", "#f59e0b"),
        ),
    ),
    ComponentDescriptor(
        type=T.ABOUT,
        label="About Us",
        category=C.SECTIONS,
        defaults={
            "title": "About Us",
            "subtitle": "Who We Are",
            "content": "With over ten years of experience we lead the digital transformation of businesses. "
                       "Our customer-focused approach and innovative solutions set us apart.",
            "image": "https://images.unsplash.com/photo-1522071820081-009f0129c71c?w=600",
            "stats": [
                {"value": "500+", "label": "Happy Clients"},
                {"value": "1000+", "label": "Projects Delivered"},
                {"value": "10+", "label": "Years of Experience"},
            ],
        },
        fields=(
            _f("title", "Title"),
            _f("content", "Content", FieldKind.TEXTAREA),
            _f("image", "Image (URL)", FieldKind.URL),
        ),
    ),
    ComponentDescriptor(
        type=T.FEATURES,
        label="Features",
        category=C.SECTIONS,
        defaults={
            "title": "Our Features",
            "subtitle": "Why choose us?",
            "items": [
                {"title": "Fast Delivery", "description": "We bring your projects to life quickly", "icon": "⚡"},
                {"title": "Modern Design", "description": "Stand out with current design trends", "icon": "🎨"},
                {"title": "24/7 Support", "description": "We are always here for you", "icon": "💬"},
                {"title": "SEO Optimized", "description": "Climb the search rankings", "icon": "📈"},
                {"title": "Mobile Ready", "description": "Looks great on every device", "icon": "📱"},
                {"title": "Secure Hosting", "description": "SSL and security certificates", "icon": "🔒"},
            ],
        },
        fields=(
            _f("title", "Title"),
            _objects("items", "Items", _ITEM_TITLE_DESC, {"title": "New Item", "description": "", "icon": "✨"}),
        ),
    ),
    ComponentDescriptor(
        type=T.SERVICES,
        label="Services",
        category=C.SECTIONS,
        defaults={
            "title": "Our Services",
            "subtitle": "How can we help?",
            "items": [
                {"title": "Web Design", "description": "Custom designed websites", "price": "from $500", "icon": "🌐"},
                {"title": "E-Commerce", "description": "Online store solutions", "price": "from $1,000", "icon": "🛒"},
                {"title": "Mobile Apps", "description": "iOS and Android apps", "price": "from $1,500", "icon": "📱"},
                {"title": "SEO Consulting", "description": "Search engine optimization", "price": "$200/mo", "icon": "📊"},
            ],
        },
        fields=(
            _f("title", "Title"),
            _objects("items", "Items", _ITEM_TITLE_DESC, {"title": "New Item", "description": "", "icon": "✨"}),
        ),
    ),
    ComponentDescriptor(
        type=T.STATS,
        label="Statistics",
        category=C.SECTIONS,
        defaults={
            "title": "By the Numbers",
            "items": [
                {"value": "500+", "label": "Happy Clients"},
                {"value": "1,200+", "label": "Projects Delivered"},
                {"value": "50+", "label": "Team Members"},
                {"value": "15+", "label": "Awards"},
            ],
        },
        fields=(
            _f("title", "Title"),
            _objects("items", "Figures", (_f("value", "Value"), _f("label", "Label")), {"value": "0", "label": "New"}),
        ),
    ),
    ComponentDescriptor(
        type=T.TIMELINE,
        label="Timeline",
        category=C.SECTIONS,
        defaults={
            "title": "Our History",
            "items": [
                {"year": "2015", "title": "Founded", "description": "Started with a small team"},
                {"year": "2017", "title": "Growth", "description": "Reached our first 100 clients"},
                {"year": "2020", "title": "Expansion", "description": "Entered international markets"},
                {"year": "2024", "title": "Leadership", "description": "Became an industry leader"},
            ],
        },
        fields=(
            _f("title", "Title"),
            _objects(
                "items",
                "Milestones",
                (_f("year", "Year"), _f("title", "Title"), _f("description", "Description")),
                {"year": "2025", "title": "New Milestone", "description": ""},
            ),
        ),
    ),
    ComponentDescriptor(
        type=T.FAQ,
        label="FAQ",
        category=C.SECTIONS,
        defaults={
            "title": "Frequently Asked Questions",
            "items": [
                {"question": "How does the project process work?",
                 "answer": "Discovery, design, development and testing. We stay in touch at every step."},
                {"question": "What are the payment terms?",
                 "answer": "50% up front and 50% on delivery. Installments are available."},
                {"question": "Do you offer support?",
                 "answer": "Yes, 24/7 technical support and one year of free maintenance."},
                {"question": "Are revisions included?",
                 "answer": "Every project includes three free revisions."},
            ],
        },
        fields=(
            _f("title", "Title"),
            _objects(
                "items",
                "Questions",
                (_f("question", "Question"), _f("answer", "Answer", FieldKind.TEXTAREA)),
                {"question": "New question?", "answer": "Answer"},
            ),
        ),
    ),
    ComponentDescriptor(
        type=T.TEAM,
        label="Team",
        category=C.SECTIONS,
        defaults={
            "title": "Our Team",
            "subtitle": "The people behind our success",
            "members": [
                {"name": "Alex Morgan", "role": "Founder & CEO", "image": "https://randomuser.me/api/portraits/men/1.jpg"},
                {"name": "Emma Clark", "role": "Design Director", "image": "https://randomuser.me/api/portraits/women/2.jpg"},
                {"name": "Liam Turner", "role": "Lead Developer", "image": "https://randomuser.me/api/portraits/men/3.jpg"},
                {"name": "Sophia Reed", "role": "Project Manager", "image": "https://randomuser.me/api/portraits/women/4.jpg"},
            ],
        },
        fields=(
            _f("title", "Title"),
            _objects(
                "members",
                "Members",
                (_f("name", "Name"), _f("role", "Role"), _f("image", "Photo (URL)", FieldKind.URL)),
                {"name": "New Member", "role": "Role", "image": ""},
            ),
        ),
    ),
    ComponentDescriptor(
        type=T.TESTIMONIALS,
        label="Testimonials",
        category=C.SECTIONS,
        defaults={
            "title": "Client Testimonials",
            "subtitle": "What our clients say",
            "items": [
                {"name": "Daniel Brooks", "company": "ABC Corp", "rating": 5,
                 "text": "A great team! They delivered our project on time and flawlessly.",
                 "image": "https://randomuser.me/api/portraits/men/10.jpg"},
                {"name": "Olivia Hayes", "company": "XYZ Ltd.", "rating": 5,
                 "text": "Their professional approach and creative solutions exceeded our expectations.",
                 "image": "https://randomuser.me/api/portraits/women/11.jpg"},
                {"name": "Noah Bennett", "company": "Tech Start", "rating": 5,
                 "text": "Our sales grew 200% thanks to the new store. Thank you!",
                 "image": "https://randomuser.me/api/portraits/men/12.jpg"},
            ],
        },
        fields=(
            _f("title", "Title"),
            _objects(
                "items",
                "Testimonials",
                (_f("name", "Name"), _f("company", "Company"), _f("text", "Comment", FieldKind.TEXTAREA)),
                {"name": "New Client", "company": "", "text": "", "rating": 5},
            ),
        ),
    ),
    ComponentDescriptor(
        type=T.CLIENTS,
        label="Clients / Logos",
        category=C.SECTIONS,
        defaults={
            "title": "Trusted Partners",
            "logos": [
                {"name": "Google", "url": "#"},
                {"name": "Microsoft", "url": "#"},
                {"name": "Amazon", "url": "#"},
                {"name": "Apple", "url": "#"},
                {"name": "Meta", "url": "#"},
            ],
        },
        fields=(
            _f("title", "Title"),
            _objects("logos", "Logos", (_f("name", "Name"), _f("url", "Link", FieldKind.URL)), {"name": "New Client", "url": "#"}),
        ),
    ),
    ComponentDescriptor(
        type=T.BLOG,
        label="Blog Posts",
        category=C.SECTIONS,
        defaults={
            "title": "Blog Posts",
            "posts": [
                {"title": "Web Design Trends 2024", "excerpt": "Discover this year's most popular design trends...",
                 "image": "https://images.unsplash.com/photo-1467232004584-a241de8bcf5d?w=400", "date": "Jan 15, 2024"},
                {"title": "SEO Tips", "excerpt": "Ways to climb the search rankings...",
                 "image": "https://images.unsplash.com/photo-1432888622747-4eb9a8efeb07?w=400", "date": "Jan 10, 2024"},
                {"title": "E-Commerce Strategies", "excerpt": "Effective ways to grow online sales...",
                 "image": "https://images.unsplash.com/photo-1556742049-0cfed4f6a45d?w=400", "date": "Jan 5, 2024"},
            ],
        },
        fields=(
            _f("title", "Title"),
            _objects(
                "posts",
                "Posts",
                (_f("title", "Title"), _f("excerpt", "Excerpt"), _f("date", "Date")),
                {"title": "New Post", "excerpt": "", "image": "", "date": ""},
            ),
        ),
    ),
    ComponentDescriptor(
        type=T.PORTFOLIO,
        label="Portfolio",
        category=C.SECTIONS,
        defaults={
            "title": "Portfolio",
            "subtitle": "Our latest work",
            "items": [
                {"title": "Online Store", "category": "Web Design", "image": f"{_IMG}?w=400"},
                {"title": "Mobile App", "category": "Apps",
                 "image": "https://images.unsplash.com/photo-1512941937669-90a1b58e7e9c?w=400"},
                {"title": "Corporate Site", "category": "Web Design",
                 "image": "https://images.unsplash.com/photo-1467232004584-a241de8bcf5d?w=400"},
                {"title": "Dashboard UI", "category": "UI/UX",
                 "image": "https://images.unsplash.com/photo-1551288049-bebda4e38f71?w=400"},
            ],
            "columns": 2,
        },
    ),
]


# ============================================================================
# Content
# ============================================================================

_CONTENT = [
    ComponentDescriptor(
        type=T.TEXT,
        label="Text Block",
        category=C.CONTENT,
        defaults={
            "content": "Write your text here. Text blocks can be displayed in several styles.",
            "align": "left",
            "fontSize": "base",
        },
        fields=(
            _f("content", "Content", FieldKind.TEXTAREA),
            _select("align", "Alignment", _ALIGN + ("justify",)),
            _select("fontSize", "Font size", ("sm", "base", "lg", "xl"), "base"),
        ),
    ),
    ComponentDescriptor(
        type=T.HEADING,
        label="Heading",
        category=C.CONTENT,
        defaults={"text": "Heading Text", "level": "h2", "align": "center"},
        fields=(
            _f("text", "Text"),
            _select("level", "Level", ("h1", "h2", "h3", "h4", "h5", "h6"), "h2"),
            _select("align", "Alignment", _ALIGN, "center"),
        ),
    ),
    ComponentDescriptor(
        type=T.BUTTON,
        label="Button",
        category=C.CONTENT,
        defaults={"text": "Button", "link": "#", "style": "primary", "size": "medium"},
        fields=(
            _f("text", "Text"),
            _f("link", "Link", FieldKind.URL, "#"),
            _select("style", "Style", ("primary", "secondary", "outline")),
        ),
    ),
    ComponentDescriptor(
        type=T.LIST,
        label="List",
        category=C.CONTENT,
        defaults={
            "title": "Highlights",
            "items": ["Professional design", "Fast delivery", "24/7 support", "Fair pricing"],
            "style": "check",
        },
        fields=(
            _f("title", "Title"),
            _strings("items", "Items", "New item"),
        ),
    ),
    ComponentDescriptor(
        type=T.QUOTE,
        label="Quote",
        category=C.CONTENT,
        defaults={
            "text": "Success is where preparation and opportunity meet.",
            "author": "Bobby Unser",
            "style": "modern",
        },
        fields=(
            _f("text", "Quote", FieldKind.TEXTAREA),
            _f("author", "Author"),
        ),
    ),
    ComponentDescriptor(
        type=T.CODE,
        label="Code Block",
        category=C.CONTENT,
        defaults={
            "language": "javascript",
            "code": '// Sample JavaScript\nconst greeting = "Hello World!";\nconsole.log(greeting);',
            "showLineNumbers": True,
            "theme": "dark",
        },
        fields=(
            _select("language", "Language", ("javascript", "python", "html", "css", "json", "bash")),
            _f("code", "Code", FieldKind.TEXTAREA),
            _select("theme", "Theme", ("dark", "light")),
            _flag("showLineNumbers", "Show line numbers", True),
        ),
    ),
]


# ============================================================================
# Media
# ============================================================================

_MEDIA = [
    ComponentDescriptor(
        type=T.IMAGE,
        label="Image",
        category=C.MEDIA,
        defaults={"src": f"{_IMG}?w=800", "alt": "Image", "width": "full", "rounded": True},
        fields=(
            _f("src", "Image (URL)", FieldKind.URL),
            _f("alt", "Alt text"),
            _select("width", "Width", ("full", "large", "medium", "small")),
            _flag("rounded", "Rounded corners", True),
        ),
    ),
    ComponentDescriptor(
        type=T.GALLERY,
        label="Gallery",
        category=C.MEDIA,
        defaults={
            "title": "Gallery",
            "subtitle": "Samples from our projects",
            "columns": 3,
            "images": [
                f"{_IMG}?w=400",
                "https://images.unsplash.com/photo-1498050108023-c5249f4df085?w=400",
                "https://images.unsplash.com/photo-1504639725590-34d0984388bd?w=400",
                "https://images.unsplash.com/photo-1517180102446-f3ece451e9d8?w=400",
                "https://images.unsplash.com/photo-1551288049-bebda4e38f71?w=400",
                "https://images.unsplash.com/photo-1559028012-481c04fa702d?w=400",
            ],
        },
        fields=(
            _f("title", "Title"),
            _select("columns", "Columns", (2, 3, 4), 3),
            _strings("images", "Images", ""),
        ),
    ),
    ComponentDescriptor(
        type=T.VIDEO,
        label="Video",
        category=C.MEDIA,
        defaults={
            "title": "Intro Video",
            "url": "https://www.youtube.com/embed/dQw4w9WgXcQ",
            "thumbnail": "https://images.unsplash.com/photo-1536240478700-b869070f9279?w=800",
        },
        fields=(
            _f("title", "Title"),
            _f("url", "Embed URL", FieldKind.URL),
        ),
    ),
    ComponentDescriptor(
        type=T.SLIDER,
        label="Slider",
        category=C.MEDIA,
        defaults={
            "images": [
                {"src": f"{_IMG}?w=1200", "title": "Slide 1"},
                {"src": "https://images.unsplash.com/photo-1498050108023-c5249f4df085?w=1200", "title": "Slide 2"},
                {"src": "https://images.unsplash.com/photo-1504639725590-34d0984388bd?w=1200", "title": "Slide 3"},
            ],
            "autoplay": True,
        },
        fields=(
            _objects("images", "Slides", (_f("src", "Image (URL)", FieldKind.URL), _f("title", "Title")), {"src": "", "title": "New Slide"}),
            _flag("autoplay", "Autoplay", True),
        ),
    ),
    ComponentDescriptor(type=T.MEDIATEXT, label="Media + Text", category=C.MEDIA),
    ComponentDescriptor(type=T.AUDIO, label="Audio Player", category=C.MEDIA),
    ComponentDescriptor(type=T.FILE, label="File Download", category=C.MEDIA),
    ComponentDescriptor(type=T.ICONBOX, label="Icon Box", category=C.MEDIA),
]


# ============================================================================
# Widgets
# ============================================================================

_COUNTED = (_f("name", "Name"), _number("count", "Count"))

_WIDGETS = [
    ComponentDescriptor(
        type=T.SEARCH,
        label="Search Box",
        category=C.WIDGETS,
        defaults={"placeholder": "Search...", "buttonText": "Search", "showButton": True, "bgColor": "#f9fafb"},
        fields=(
            _f("placeholder", "Placeholder"),
            _f("buttonText", "Button text"),
            _color("bgColor", "Background color", "#f9fafb"),
            _flag("showButton", "Show button", True),
        ),
    ),
    ComponentDescriptor(
        type=T.SOCIALICONS,
        label="Social Icons",
        category=C.WIDGETS,
        defaults={
            "title": "Follow Us",
            "icons": [
                {"platform": "facebook", "url": "#", "color": "#1877f2"},
                {"platform": "twitter", "url": "#", "color": "#1da1f2"},
                {"platform": "instagram", "url": "#", "color": "#e4405f"},
                {"platform": "linkedin", "url": "#", "color": "#0077b5"},
                {"platform": "youtube", "url": "#", "color": "#ff0000"},
            ],
            "size": "medium",
            "style": "circle",
        },
        fields=(
            _f("title", "Title"),
            _select("size", "Size", _SIZES, "medium"),
            _select("style", "Style", ("circle", "square", "rounded")),
            _objects(
                "icons",
                "Icons",
                (_f("platform", "Platform"), _f("url", "Link", FieldKind.URL), _color("color", "Color", "#000000")),
                {"platform": "website", "url": "#", "color": "#6b7280"},
            ),
        ),
    ),
    ComponentDescriptor(
        type=T.CALENDAR,
        label="Calendar",
        category=C.WIDGETS,
        defaults={
            "title": "Event Calendar",
            "events": [
                {"date": "2024-01-15", "title": "Webinar"},
                {"date": "2024-01-20", "title": "Workshop"},
            ],
            "locale": "en",
        },
        fields=(
            _f("title", "Title"),
            _select("locale", "Language", ("en", "tr", "de", "fr")),
            _objects("events", "Events", (_f("date", "Date", FieldKind.DATE), _f("title", "Title")), {"date": "", "title": "New Event"}),
        ),
    ),
    ComponentDescriptor(
        type=T.ARCHIVES,
        label="Archives",
        category=C.WIDGETS,
        defaults={
            "title": "Archives",
            "items": [
                {"month": "January 2024", "count": 5},
                {"month": "December 2023", "count": 8},
                {"month": "November 2023", "count": 12},
            ],
            "showCount": True,
        },
        fields=(
            _f("title", "Title"),
            _flag("showCount", "Show post count", True),
            _objects("items", "Months", (_f("month", "Month"), _number("count", "Count")), {"month": "New Month", "count": 0}),
        ),
    ),
    ComponentDescriptor(
        type=T.CATEGORIES,
        label="Categories",
        category=C.WIDGETS,
        defaults={
            "title": "Categories",
            "items": [
                {"name": "Web Design", "count": 15},
                {"name": "SEO", "count": 8},
                {"name": "E-Commerce", "count": 12},
                {"name": "Mobile", "count": 6},
            ],
            "showCount": True,
        },
        fields=(
            _f("title", "Title"),
            _flag("showCount", "Show post count", True),
            _objects("items", "Categories", _COUNTED, {"name": "New Category", "count": 0}),
        ),
    ),
    ComponentDescriptor(
        type=T.LATESTPOSTS,
        label="Latest Posts",
        category=C.WIDGETS,
        defaults={"title": "Latest Posts", "count": 3, "showThumbnail": True, "showDate": True, "showExcerpt": False},
        fields=(
            _f("title", "Title"),
            _number("count", "Post count", 3),
            _flag("showThumbnail", "Show thumbnail", True),
            _flag("showDate", "Show date", True),
            _flag("showExcerpt", "Show excerpt"),
        ),
    ),
    ComponentDescriptor(
        type=T.CUSTOMHTML,
        label="Custom HTML",
        category=C.WIDGETS,
        defaults={
            "code": '<div style="padding: 20px; background: #f0f0f0; border-radius: 8px;">\n'
                    "  <h3>Custom HTML Content</h3>\n"
                    "  <p>Write your own HTML here.</p>\n"
                    "</div>",
            "sandbox": False,
        },
        fields=(
            _f("code", "HTML", FieldKind.TEXTAREA),
            _flag("sandbox", "Sandboxed"),
        ),
    ),
    ComponentDescriptor(
        type=T.WEATHER,
        label="Weather",
        category=C.WIDGETS,
        defaults={"city": "Istanbul", "units": "metric", "showIcon": True, "showForecast": False},
        fields=(
            _f("city", "City"),
            _select("units", "Units", ("metric", "imperial")),
            _flag("showIcon", "Show icon", True),
            _flag("showForecast", "Show forecast"),
        ),
    ),
]


# ============================================================================
# Commerce
# ============================================================================

_PRODUCT_FIELDS = (_f("name", "Name"), _f("price", "Price"), _f("image", "Image (URL)", FieldKind.URL))

_COMMERCE = [
    ComponentDescriptor(
        type=T.PRICING,
        label="Pricing",
        category=C.COMMERCE,
        defaults={
            "title": "Pricing",
            "subtitle": "Pick the plan that suits you",
            "plans": [
                {"name": "Starter", "price": "$29", "period": "/mo",
                 "features": ["5 Pages", "SSL Certificate", "Email Support"], "popular": False, "buttonText": "Start"},
                {"name": "Professional", "price": "$59", "period": "/mo",
                 "features": ["15 Pages", "SSL Certificate", "24/7 Support", "SEO Tools", "Analytics"],
                 "popular": True, "buttonText": "Most Popular"},
                {"name": "Enterprise", "price": "$99", "period": "/mo",
                 "features": ["Unlimited Pages", "SSL Certificate", "Priority Support", "Advanced SEO", "Custom Integrations"],
                 "popular": False, "buttonText": "Contact Us"},
            ],
        },
        fields=(
            _f("title", "Title"),
            _objects(
                "plans",
                "Plans",
                (
                    _f("name", "Name"),
                    _f("price", "Price"),
                    _f("period", "Period"),
                    _f("buttonText", "Button text"),
                    _flag("popular", "Highlighted"),
                ),
                {"name": "New Plan", "price": "$0", "period": "/mo", "features": [], "popular": False, "buttonText": "Choose"},
            ),
        ),
    ),
    ComponentDescriptor(
        type=T.PRODUCTS,
        label="Products",
        category=C.COMMERCE,
        defaults={
            "title": "Our Products",
            "items": [
                {"name": "Website Package", "price": "$499", "image": f"{_IMG}?w=300"},
                {"name": "E-Commerce Package", "price": "$999",
                 "image": "https://images.unsplash.com/photo-1556742049-0cfed4f6a45d?w=300"},
                {"name": "SEO Package", "price": "$199/mo",
                 "image": "https://images.unsplash.com/photo-1432888622747-4eb9a8efeb07?w=300"},
            ],
        },
        fields=(
            _f("title", "Title"),
            _objects("items", "Products", _PRODUCT_FIELDS, {"name": "New Product", "price": "$0", "image": ""}),
        ),
    ),
    ComponentDescriptor(
        type=T.PRODUCTCARD,
        label="Product Card",
        category=C.COMMERCE,
        defaults={
            "name": "Premium Product",
            "price": "$99",
            "oldPrice": "$129",
            "image": "https://images.unsplash.com/photo-1523275335684-37898b6baf30?w=400",
            "badge": "Sale",
            "rating": 4.5,
            "inStock": True,
        },
        fields=(
            _f("name", "Name"),
            _f("price", "Price"),
            _f("oldPrice", "Old price"),
            _f("image", "Image (URL)", FieldKind.URL),
            _f("badge", "Badge"),
            _number("rating", "Rating", 0),
            _flag("inStock", "In stock", True),
        ),
    ),
    ComponentDescriptor(
        type=T.PRODUCTGRID,
        label="Product Grid",
        category=C.COMMERCE,
        defaults={
            "title": "Popular Products",
            "products": [
                {"name": "Product 1", "price": "$29", "image": "https://images.unsplash.com/photo-1523275335684-37898b6baf30?w=300"},
                {"name": "Product 2", "price": "$49", "image": "https://images.unsplash.com/photo-1505740420928-5e560c06d30e?w=300"},
                {"name": "Product 3", "price": "$79", "image": "https://images.unsplash.com/photo-1572635196237-14b3f281503f?w=300"},
            ],
            "columns": 3,
        },
        fields=(
            _f("title", "Title"),
            _select("columns", "Columns", (2, 3, 4), 3),
            _objects("products", "Products", _PRODUCT_FIELDS, {"name": "New Product", "price": "$0", "image": ""}),
        ),
    ),
    ComponentDescriptor(
        type=T.CARTBUTTON,
        label="Cart Button",
        category=C.COMMERCE,
        defaults={"text": "Add to Cart", "icon": "🛒", "style": "primary", "size": "medium", "fullWidth": False},
        fields=(
            _f("text", "Text"),
            _f("icon", "Icon"),
            _select("style", "Style", ("primary", "secondary", "outline")),
            _select("size", "Size", _SIZES, "medium"),
            _flag("fullWidth", "Full width"),
        ),
    ),
    ComponentDescriptor(
        type=T.PRICEDISPLAY,
        label="Price Display",
        category=C.COMMERCE,
        defaults={"price": "$149", "oldPrice": "$199", "currency": "$", "period": "/mo", "showSavings": True},
        fields=(
            _f("price", "Price"),
            _f("oldPrice", "Old price"),
            _f("currency", "Currency"),
            _f("period", "Period"),
            _flag("showSavings", "Show savings", True),
        ),
    ),
    ComponentDescriptor(
        type=T.SALEBADGE,
        label="Sale Badge",
        category=C.COMMERCE,
        defaults={"text": "30% Off", "type": "sale", "position": "top-right", "animated": True},
        fields=(
            _f("text", "Text"),
            _select("type", "Type", ("sale", "new", "hot", "limited")),
            _select("position", "Position", ("top-right", "top-left", "bottom-right", "bottom-left")),
            _flag("animated", "Animated", True),
        ),
    ),
    ComponentDescriptor(
        type=T.COUNTDOWN,
        label="Countdown",
        category=C.COMMERCE,
        defaults={
            "title": "Sale Ends Soon!",
            "targetDate": "2025-12-31T23:59:59",
            "showDays": True,
            "showHours": True,
            "showMinutes": True,
            "showSeconds": True,
            "bgColor": "#dc2626",
            "textColor": "#ffffff",
        },
        fields=(
            _f("title", "Title"),
            _f("targetDate", "Target date", FieldKind.DATETIME),
            _color("bgColor", "Background color", "#dc2626"),
            _color("textColor", "Text color"),
            _flag("showDays", "Show days", True),
            _flag("showHours", "Show hours", True),
            _flag("showMinutes", "Show minutes", True),
            _flag("showSeconds", "Show seconds", True),
        ),
    ),
]


# ============================================================================
# Forms
# ============================================================================

_FORMS = [
    ComponentDescriptor(
        type=T.CONTACT,
        label="Contact Form",
        category=C.FORMS,
        defaults={
            "title": "Contact",
            "subtitle": "Get in touch with us",
            "email": "info@webcraft.com",
            "phone": "+1 555 123 4567",
            "address": "Main Street 1, Springfield",
            "showForm": True,
            "showMap": True,
        },
        fields=(
            _f("title", "Title"),
            _f("email", "Email", FieldKind.EMAIL),
            _f("phone", "Phone", FieldKind.PHONE),
            _f("address", "Address", FieldKind.TEXTAREA),
            _flag("showForm", "Show form", True),
        ),
    ),
    ComponentDescriptor(
        type=T.NEWSLETTER,
        label="Newsletter Form",
        category=C.FORMS,
        defaults={
            "title": "Subscribe to Our Newsletter",
            "subtitle": "Be the first to hear about news and offers.",
            "buttonText": "Subscribe",
            "placeholder": "Your email address",
        },
        fields=(
            _f("title", "Title"),
            _f("subtitle", "Subtitle"),
            _f("buttonText", "Button text"),
            _f("placeholder", "Placeholder"),
        ),
    ),
    ComponentDescriptor(
        type=T.MAP,
        label="Map",
        category=C.FORMS,
        defaults={
            "title": "Our Location",
            "address": "Main Street 1, Springfield",
            "embedUrl": "https://www.google.com/maps/embed?pb=!1m18!1m12!1m3!1d3008.2461899671!2d29.0!3d41.08",
        },
        fields=(
            _f("title", "Title"),
            _f("address", "Address", FieldKind.TEXTAREA),
        ),
    ),
    ComponentDescriptor(
        type=T.LOGINFORM,
        label="Login Form",
        category=C.FORMS,
        defaults={
            "title": "Sign In",
            "subtitle": "Sign in to your account",
            "showRegisterLink": True,
            "showForgotPassword": True,
            "buttonText": "Sign In",
            "bgColor": "#ffffff",
        },
        fields=(
            _f("title", "Title"),
            _f("subtitle", "Subtitle"),
            _f("buttonText", "Button text"),
            _color("bgColor", "Background color"),
            _flag("showRegisterLink", "Show register link", True),
            _flag("showForgotPassword", "Show forgot password", True),
        ),
    ),
]


CATALOG: tuple[ComponentDescriptor, ...] = tuple(_LAYOUT + _SECTIONS + _CONTENT + _MEDIA + _WIDGETS + _COMMERCE + _FORMS)

__all__ = ["CATALOG"]

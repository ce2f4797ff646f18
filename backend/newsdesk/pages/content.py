SITE_NAME = "Coimbatore Express"

CONTACT_EMAIL = "editor@coimbatoreexpress.com"
CONTACT_PHONE = "+91 95009 80047"
CONTACT_PHONE_HREF = "tel:+919500980047"
CONTACT_ADDRESS = ("Coimbatore, Tamil Nadu", "India")

ABOUT_INTRO = [
    (
        "Welcome to <strong>Coimbatore Express</strong>, your trusted source for comprehensive, "
        "timely, and reliable news coverage exclusively focused on Coimbatore."
    ),
    (
        "In an era of information overload, we believe that local news matters more than ever. "
        "Coimbatore Express was founded with a simple yet powerful mission: to deliver fast, "
        "accurate, and in-depth coverage of the stories that shape our city."
    ),
    (
        "From breaking news and civic issues to business developments, educational achievements, "
        "cultural events, and community stories, we are committed to being the english voice of Coimbatore. "
        "Our dedicated team of journalists works around the clock to bring you the most relevant "
        "updates about our vibrant city."
    ),
]

ABOUT_PILLARS = [
    {
        "title": "Our Mission",
        "icon": "target",
        "text": (
            "To provide factual, unbiased, and timely news coverage that empowers the people of "
            "Coimbatore to stay informed, engaged, and connected with their community."
        ),
    },
    {
        "title": "Our Values",
        "icon": "award",
        "text": (
            "Integrity, accuracy, and transparency guide everything we do. We are committed to "
            "journalistic excellence and serving the public interest above all else."
        ),
    },
    {
        "title": "Community First",
        "icon": "users",
        "text": (
            "We are more than just a news platform; we are part of the Coimbatore community. "
            "Your stories, voices, and concerns drive our editorial agenda."
        ),
    },
    {
        "title": "Innovation",
        "icon": "trending-up",
        "text": (
            "Leveraging modern technology and digital platforms, we ensure that news reaches you "
            "faster and more conveniently than ever before."
        ),
    },
]

COVERAGE = [
    "Local governance and civic issues",
    "Business and economic development",
    "Education and academic achievements",
    "Sports and athletic events",
    "Real estate and infrastructure",
    "Arts, culture, and lifestyle",
    "Community events and celebrations",
    "Opinion and editorial perspectives",
]

# name, input type, label, placeholder
CONTACT_FIELDS = [
    ("name", "text", "Name", "Your full name"),
    ("email", "email", "Email", "your.email@example.com"),
    ("subject", "text", "Subject", "What is this about?"),
    ("message", "textarea", "Message", "Your message here..."),
]

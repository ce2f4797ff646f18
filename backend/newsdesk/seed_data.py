"""Fixed rows inserted by the seeding routine."""

import json
from datetime import datetime

ADMIN_EMAIL = "admin@coimbatoreexpress.com"
ADMIN_NAME = "Admin User"

OBSOLETE_CATEGORY_SLUGS = ("transport",)

CATEGORIES = [
    {"name": "Local", "slug": "local", "description": "Local news from Coimbatore", "color": "#0A1F44", "icon": "MapPin", "sort_order": 1},
    {"name": "Education", "slug": "education", "description": "Education and school news", "color": "#7C3AED", "icon": "GraduationCap", "sort_order": 2},
    {"name": "Business", "slug": "business", "description": "Business and economic news", "color": "#059669", "icon": "Briefcase", "sort_order": 3},
    {"name": "Sports", "slug": "sports", "description": "Sports and athletic events", "color": "#DC2626", "icon": "Trophy", "sort_order": 4},
    {"name": "Real Estate", "slug": "real-estate", "description": "Real estate and property news", "color": "#EA580C", "icon": "Home", "sort_order": 5},
    {"name": "Lifestyle", "slug": "lifestyle", "description": "Lifestyle and entertainment news", "color": "#BE185D", "icon": "Heart", "sort_order": 6},
    {"name": "Events", "slug": "events", "description": "Community events and celebrations", "color": "#0891B2", "icon": "Calendar", "sort_order": 7},
    {"name": "Political", "slug": "political", "description": "Political news and developments", "color": "#1F2937", "icon": "Users", "sort_order": 8},
    {"name": "Devotional", "slug": "devotional", "description": "Religious and spiritual news", "color": "#7C2D12", "icon": "Heart", "sort_order": 9},
]

AUTHORS = [
    {
        "name": "Coimbatore Express Staff",
        "email": "news@coimbatoreexpress.com",
        "phone": "+91 98765 43210",
        "bio": (
            "Our dedicated team of local journalists covering news from Coimbatore and surrounding areas. "
            "We focus on delivering accurate, timely news that matters to our community."
        ),
        "role": "ADMIN",
        "specialties": "Local News,Community Events,Politics",
        "social_links": json.dumps({
            "twitter": "https://twitter.com/ctstaff",
            "linkedin": "https://linkedin.com/company/coimbatore-express",
        }),
        "location": "Coimbatore, Tamil Nadu",
        "verified": True,
    },
    {
        "name": "Sports Correspondent",
        "email": "sports@coimbatoreexpress.com",
        "phone": "+91 98765 43211",
        "bio": (
            "Covering local sports and athletic events in Coimbatore and beyond. Passionate about bringing you "
            "the latest updates on cricket, football, athletics, and emerging sports."
        ),
        "role": "EDITOR",
        "specialties": "Sports,Cricket,Football,Athletics",
        "social_links": json.dumps({
            "twitter": "https://twitter.com/sportsct",
        }),
        "location": "Coimbatore, Tamil Nadu",
        "verified": True,
    },
    {
        "name": "Business Reporter",
        "email": "business@coimbatoreexpress.com",
        "phone": "+91 98765 43212",
        "bio": (
            "Reporting on local business and economic developments. Specializing in industry analysis, "
            "startup coverage, and economic trends affecting the Coimbatore region."
        ),
        "role": "AUTHOR",
        "specialties": "Business,Economy,Startups,Industry",
        "social_links": json.dumps({
            "linkedin": "https://linkedin.com/in/business-reporter-ct",
            "website": "https://businessreporter.com",
        }),
        "location": "Coimbatore, Tamil Nadu",
        "verified": True,
    },
]

# category_slug / author_name are resolved against rows upserted earlier in the run
ARTICLES = [
    {
        "title": "Special Pradosham Pooja Held at Dharmalingeswarar Temple",
        "excerpt": (
            "The renowned Dharmalingeswarar Temple, located on the hill at Mathukkarai in Coimbatore, "
            "witnessed special prayers on the occasion of Pradosham on Monday."
        ),
        "content": """Coimbatore:
The renowned Dharmalingeswarar Temple, located on the hill at Mathukkarai in Coimbatore, witnessed special prayers on the occasion of Pradosham on Monday.

Special abhishekam and poojas were performed for Lord Dharmalingeswarar and Nandi. Following the rituals, the deity was adorned with special decorations and offered deepa aradhana. Devotees had darshan of the Lord in all his splendour as he bestowed blessings in an ornate attire.

A large number of devotees participated in the event and offered their prayers. The temple committee had made elaborate arrangements for the smooth conduct of the rituals and to facilitate the devotees visit.""",
        "category_slug": "events",
        "author_name": "Coimbatore Express Staff",
        "status": "PUBLISHED",
        "is_featured": True,
        "is_breaking": False,
        "published_at": datetime(2025, 11, 7, 10, 0, 0),
        "views": 1250,
        "seo_keywords": "temple,pradosham,pooja,dharmalingeswarar",
    },
    {
        "title": "Coimbatore Vizha to be held from November 14 to 24",
        "excerpt": (
            "The 18th edition of Coimbatore Vizha will take place from November 14 to 24, "
            "organized by the Young Indians (Yi) Coimbatore chapter."
        ),
        "content": """Coimbatore:
The 18th edition of Coimbatore Vizha will take place from November 14 to 24, organized by the Young Indians (Yi) Coimbatore chapter. The festival will be officially launched on the evening of October 31 at Brookefields Mall.

Over 100 events are planned across 11 days, featuring the marquee Sky Dance projection mapping experience held each evening at CODISSIA Trade Fair Complex. This years Vizha emphasizes inclusivity, with business pitches by transgender entrepreneurs and para sports events for children with autism.

Events are spread across multiple neighborhoods to engage residents directly. Highlights include the Isai Mazhai music program at six venues, clean-up drives at five locations, cultural showcases at 11 sites, and the Art Street festival on Scheme Road on November 22 and 23, along with musical performances on East TV Swamy Road.

The festival aims to celebrate the spirit and diversity of Coimbatore through culture, community, and creativity.""",
        "category_slug": "events",
        "author_name": "Coimbatore Express Staff",
        "status": "PUBLISHED",
        "is_featured": True,
        "is_breaking": False,
        "published_at": datetime(2025, 11, 7, 9, 0, 0),
        "views": 2100,
        "seo_keywords": "coimbatore,vizha,festival,events",
    },
    {
        "title": "Coimbatore airport records 11% rise in passenger traffic",
        "excerpt": (
            "The Coimbatore International Airport has registered an 11 percent growth in passenger traffic, "
            "handling 17.6 lakh flyers between April and September this financial year."
        ),
        "content": """Coimbatore:
The Coimbatore International Airport has registered an 11 percent growth in passenger traffic, handling 17.6 lakh flyers between April and September this financial year, according to data from the Airports Authority of India (AAI).

The airport had recorded over 30 lakh passengers in 2024, despite being designed for an annual capacity of 20 lakh. It now handles more than 30 departures a day, including domestic flights to major cities such as Chennai, Hyderabad, Mumbai, Delhi, Bengaluru, Pune, Goa, and Ahmedabad, and international services to Singapore, Abu Dhabi, and Sharjah.

The Kongu Global Forum (KGF), a consortium of business and industrial leaders from Tamil Nadus western districts, urged the authorities to draw up an interim plan to enhance the airports handling capacity. It also sought additional flights on busy domestic routes and new international services to Colombo, Bangkok, Dubai, and Doha.

Airport Director G. Sambath Kumar said that construction of a compound wall around the land recently transferred by the State government to the AAI is progressing and expected to be completed by September 2026. The wall will have a total length of about 16 kilometres.""",
        "category_slug": "business",
        "author_name": "Coimbatore Express Staff",
        "status": "PUBLISHED",
        "is_featured": False,
        "is_breaking": True,
        "published_at": datetime(2025, 11, 7, 8, 30, 0),
        "views": 1850,
        "seo_keywords": "airport,passenger,traffic,coimbatore",
    },
    {
        "title": "Coimbatore: The Rising Powerhouse of South India's Real Estate Market",
        "excerpt": (
            "Coimbatore, long celebrated as the Manchester of South India, is now commanding fresh attention "
            "as one of the country's fastest-growing real estate destinations."
        ),
        "content": """Coimbatore, long celebrated as the Manchester of South India, is now commanding fresh attention as one of the country's fastest-growing real estate destinations. What began as a textile-driven industrial town has evolved into a diversified economic hub, home to over 25,000 manufacturing, engineering, jewellery, poultry, and IT enterprises, a transformation that is now directly translating into soaring property values.

This growth story is powered by a rare blend of industrial strength, strategic infrastructure investments, and superior liveability. Remarkably, Coimbatore continues to rank among India's least-polluted urban centres, offering a quality of life unmatched in most fast-growing cities.

A recent JLL study positions Coimbatore among India's top affordable investment markets, a compelling signal for value-seeking buyers and institutional investors alike. The impact is visible along emerging corridors and suburban belts, particularly near major highways, where land appreciation is accelerating.

Smart City Vision Converts to Real-World Value: As one of the first 20 cities chosen under India's Smart Cities Mission, Coimbatore has benefited from targeted upgrades across mobility, utilities, sustainability, and digital governance. These strategic investments have strengthened the city's reputation as a well-planned, future-ready urban centre, a key determinant for modern investors seeking long-term, stable growth markets.

Airport Expansion: A Catalyst for Capital Flows: A ₹2,000-crore expansion of Coimbatore International Airport represents a pivotal milestone in the city's growth trajectory. With 90% of land acquisition already complete, the expansion will unlock enhanced domestic and international connectivity, positioning Coimbatore for heightened investment inflows across sectors from global manufacturing to hospitality.

Real estate activity around the airport corridor has already begun reflecting the shift, with rising demand and price appreciation.""",
        "category_slug": "real-estate",
        "author_name": "Business Reporter",
        "status": "PUBLISHED",
        "is_featured": True,
        "is_breaking": False,
        "published_at": datetime(2025, 11, 7, 4, 30, 0),
        "views": 4200,
        "seo_keywords": "real estate,coimbatore,property,investment",
    },
]

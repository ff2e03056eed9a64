"""
Default website content, loaded into empty collections by the seed routes.
"""

DEFAULT_SOCIAL_LINKS = [
    {"platform": "Instagram", "url": "https://instagram.com/visualarea", "icon": "logos:instagram-icon"},
    {"platform": "Facebook", "url": "https://facebook.com/visualarea", "icon": "logos:facebook"},
    {"platform": "Twitter", "url": "https://twitter.com/visualarea", "icon": "logos:twitter"},
    {"platform": "YouTube", "url": "https://youtube.com/visualarea", "icon": "logos:youtube-icon"},
]

DEFAULT_PRICING_PLANS = [
    {
        "title": "Basic Package",
        "price": 499,
        "currency": "$",
        "period": "per project",
        "features": [
            "4 Hours of Coverage",
            "100 Digital Images",
            "Online Gallery",
            "Basic Editing",
        ],
        "isPopular": False,
        "backgroundColor": "#f9eadb",
    },
    {
        "title": "Standard Package",
        "price": 999,
        "currency": "$",
        "period": "per project",
        "features": [
            "8 Hours of Coverage",
            "300 Digital Images",
            "Online Gallery",
            "Advanced Editing",
            "One Photographer",
        ],
        "isPopular": True,
        "backgroundColor": "#ebc08f",
    },
    {
        "title": "Premium Package",
        "price": 1999,
        "currency": "$",
        "period": "per project",
        "features": [
            "Full Day Coverage",
            "Unlimited Digital Images",
            "Online Gallery",
            "Premium Editing",
            "Two Photographers",
            "Printed Photo Album",
        ],
        "isPopular": False,
        "backgroundColor": "#deb887",
    },
]

DEFAULT_PARALLAX_SECTIONS = [
    {
        "title": "Capture Your Moments",
        "subtitle": "",
        "description": "",
        "backgroundUrl": "https://img.heroui.chat/image/landscape?w=1920&h=1080&u=5",
        "buttonText": "",
        "buttonUrl": "",
    },
]

DEFAULT_CONTACTS = [
    {
        "contactType": "address",
        "label": "Main Office",
        "content": "123 Photography Lane, Visual City, VC 12345",
        "isMain": True,
    },
    {
        "contactType": "phone",
        "label": "Customer Support",
        "content": "+1 (555) 123-4567",
        "isMain": True,
    },
    {
        "contactType": "email",
        "label": "General Inquiries",
        "content": "info@visualarea.com",
        "isMain": True,
    },
]

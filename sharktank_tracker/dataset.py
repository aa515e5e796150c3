"""
Reference dataset
=================
Companies pitched on Shark Tank, seasons 1 to 16, with deal terms and
present-day status. Valuations and status are approximate and based on
publicly available information.
"""
import json
import logging
import os

from sharktank_tracker.config import COMPANIES_JSON
from sharktank_tracker.models import Company, Industry

log = logging.getLogger("tracker.dataset")

COMPANIES = [
    # Season 1 (2009)
    {
        "id": "wicked-good-cupcakes",
        "name": "Wicked Good Cupcakes",
        "season": 1,
        "episode": 2,
        "founders": ["Tracey Noonan", "Dani Vilagie"],
        "industry": "Food & Beverage",
        "original_ask": {"amount": 75000, "equity": 20},
        "deal_status": "Got Deal",
        "deal_details": {"amount": 75000, "equity": 25, "sharks": ["Kevin O'Leary"]},
        "current_status": "Active",
        "current_valuation": 25000000,
        "description": "Cupcakes in a jar with extended shelf life",
        "pitch_summary": "Mother-daughter duo selling cupcakes in mason jars that stay fresh longer",
        "current_update": "Expanded nationwide with over $25M in sales and multiple retail partnerships",
        "website": "https://wickedgoodcupcakes.com",
        "logo": "https://images.unsplash.com/photo-1587668178277-295251f900ce?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },
    {
        "id": "daisy-cakes",
        "name": "Daisy Cakes",
        "season": 1,
        "episode": 1,
        "founders": ["Kim Nelson"],
        "industry": "Food & Beverage",
        "original_ask": {"amount": 50000, "equity": 25},
        "deal_status": "Got Deal",
        "deal_details": {"amount": 50000, "equity": 25, "sharks": ["Barbara Corcoran"]},
        "current_status": "Active",
        "current_valuation": 15000000,
        "description": "Southern-style cakes shipped nationwide",
        "pitch_summary": "Traditional Southern cakes made from family recipes and shipped fresh",
        "current_update": "Successful online business with steady growth and loyal customer base",
        "website": "https://daisycakes.com",
        "logo": "https://images.unsplash.com/photo-1578985545062-69928b1d9587?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },
    {
        "id": "college-foxes-packing",
        "name": "College Foxes Packing Boxes",
        "season": 1,
        "episode": 3,
        "founders": ["Matt Hoffman"],
        "industry": "Services",
        "original_ask": {"amount": 50000, "equity": 10},
        "deal_status": "Got Deal",
        "deal_details": {"amount": 50000, "equity": 25, "sharks": ["Mark Cuban"]},
        "current_status": "Active",
        "current_valuation": 8000000,
        "description": "Moving and packing service using college students",
        "pitch_summary": "Affordable moving service that employs college students",
        "current_update": "Expanded to multiple cities with consistent revenue growth",
        "logo": "https://images.unsplash.com/photo-1558618666-fcd25c85cd64?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },

    # Season 2 (2011)
    {
        "id": "breathometer",
        "name": "Breathometer",
        "season": 2,
        "episode": 1,
        "founders": ["Charles Michael Yim"],
        "industry": "Technology",
        "original_ask": {"amount": 250000, "equity": 10},
        "deal_status": "Got Deal",
        "deal_details": {"amount": 1000000, "equity": 30, "sharks": ["Mark Cuban", "Kevin O'Leary", "Daymond John", "Lori Greiner", "Robert Herjavec"]},
        "current_status": "Closed",
        "description": "Smartphone breathalyzer device",
        "pitch_summary": "Portable breathalyzer that connects to smartphones",
        "current_update": "Shut down due to regulatory issues and accuracy problems with the device",
        "logo": "https://images.unsplash.com/photo-1512941937669-90a1b58e7e9c?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },

    # Season 3 (2012)
    {
        "id": "piperwai",
        "name": "PiperWai",
        "season": 3,
        "episode": 7,
        "founders": ["Jess Edelstein", "Sarah Ribner"],
        "industry": "Personal Care",
        "original_ask": {"amount": 50000, "equity": 10},
        "deal_status": "Got Deal",
        "deal_details": {"amount": 50000, "equity": 25, "sharks": ["Barbara Corcoran"]},
        "current_status": "Acquired",
        "current_valuation": 10000000,
        "description": "Natural deodorant made with activated charcoal",
        "pitch_summary": "Aluminum-free deodorant using activated charcoal and natural ingredients",
        "current_update": "Acquired by Unilever, proving natural personal care market potential",
        "logo": "https://images.unsplash.com/photo-1556228578-8c89e6adf883?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },

    # Season 4 (2012-2013)
    {
        "id": "scrub-daddy",
        "name": "Scrub Daddy",
        "season": 4,
        "episode": 7,
        "founders": ["Aaron Krause"],
        "industry": "Household Products",
        "original_ask": {"amount": 100000, "equity": 10},
        "deal_status": "Got Deal",
        "deal_details": {"amount": 200000, "equity": 20, "sharks": ["Lori Greiner"]},
        "current_status": "Active",
        "current_valuation": 350000000,
        "description": "Temperature-responsive cleaning sponge that changes texture",
        "pitch_summary": "Revolutionary sponge that becomes firm in cold water and soft in warm water",
        "current_update": "Became the most successful Shark Tank product ever with over $350M in sales",
        "website": "https://scrubdaddy.com",
        "logo": "https://images.unsplash.com/photo-1584464491033-06628f3a6b7b?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },
    {
        "id": "cousins-maine-lobster",
        "name": "Cousins Maine Lobster",
        "season": 4,
        "episode": 6,
        "founders": ["Jim Tselikis", "Sabin Lomac"],
        "industry": "Food & Beverage",
        "original_ask": {"amount": 55000, "equity": 5},
        "deal_status": "Got Deal",
        "deal_details": {"amount": 55000, "equity": 15, "sharks": ["Barbara Corcoran"]},
        "current_status": "Active",
        "current_valuation": 30000000,
        "description": "Food truck and restaurant chain serving Maine lobster",
        "pitch_summary": "Authentic Maine lobster served from food trucks across the country",
        "current_update": "Expanded to 50+ locations with $30M+ revenue and franchise opportunities",
        "website": "https://cousinsmainelobster.com",
        "logo": "https://images.unsplash.com/photo-1559827260-dc66d52bef19?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },
    {
        "id": "drop-stop",
        "name": "Drop Stop",
        "season": 4,
        "episode": 18,
        "founders": ["Jeffrey Simon", "Marc Newburger"],
        "industry": "Automotive",
        "original_ask": {"amount": 300000, "equity": 15},
        "deal_status": "Got Deal",
        "deal_details": {"amount": 300000, "equity": 20, "sharks": ["Lori Greiner", "Robert Herjavec"]},
        "current_status": "Active",
        "current_valuation": 25000000,
        "description": "Car seat gap filler to prevent items from falling",
        "pitch_summary": "Patented device that fills the gap between car seats and center console",
        "current_update": "Strong automotive retail presence with over $25M in sales",
        "website": "https://dropstop.com",
        "logo": "https://images.unsplash.com/photo-1449824913935-59a10b8d2000?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },

    # Season 5 (2013-2014)
    {
        "id": "ring-doorbell",
        "name": "Ring",
        "season": 5,
        "episode": 9,
        "founders": ["Jamie Siminoff"],
        "industry": "Home Security",
        "original_ask": {"amount": 700000, "equity": 10},
        "deal_status": "No Deal",
        "current_status": "Acquired",
        "current_valuation": 1200000000,
        "description": "Smart doorbell with video monitoring and two-way communication",
        "pitch_summary": "WiFi-enabled doorbell that lets you see and speak to visitors remotely",
        "current_update": "Acquired by Amazon for $1.2 billion in 2018, proving the sharks wrong",
        "website": "https://ring.com",
        "logo": "https://images.unsplash.com/photo-1558618666-fcd25c85cd64?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },
    {
        "id": "kodiak-cakes",
        "name": "Kodiak Cakes",
        "season": 5,
        "episode": 2,
        "founders": ["Joel Clark", "Cameron Smith"],
        "industry": "Food & Beverage",
        "original_ask": {"amount": 500000, "equity": 10},
        "deal_status": "No Deal",
        "current_status": "Active",
        "current_valuation": 400000000,
        "description": "Protein-packed pancake and waffle mixes",
        "pitch_summary": "Whole grain, protein-rich pancake mixes with frontier heritage branding",
        "current_update": "Massive success without shark investment, now worth over $400M with major retail presence",
        "website": "https://kodiakcakes.com",
        "logo": "https://images.unsplash.com/photo-1578985545062-69928b1d9587?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },
    {
        "id": "groovebook",
        "name": "Groovebook",
        "season": 5,
        "episode": 23,
        "founders": ["Brian Whiteman", "Julie Whiteman"],
        "industry": "Technology",
        "original_ask": {"amount": 150000, "equity": 20},
        "deal_status": "Got Deal",
        "deal_details": {"amount": 150000, "equity": 80, "sharks": ["Mark Cuban", "Kevin O'Leary"]},
        "current_status": "Acquired",
        "current_valuation": 14500000,
        "description": "Monthly photo book subscription service",
        "pitch_summary": "App that creates monthly photo books from your smartphone pictures",
        "current_update": "Acquired by Shutterfly for $14.5M in 2015",
        "logo": "https://images.unsplash.com/photo-1516035069371-29a1b244cc32?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },
    {
        "id": "tipsy-elves",
        "name": "Tipsy Elves",
        "season": 5,
        "episode": 12,
        "founders": ["Evan Mendelsohn", "Nick Morton"],
        "industry": "Apparel",
        "original_ask": {"amount": 100000, "equity": 5},
        "deal_status": "Got Deal",
        "deal_details": {"amount": 100000, "equity": 10, "sharks": ["Robert Herjavec"]},
        "current_status": "Active",
        "current_valuation": 100000000,
        "description": "Ugly Christmas sweaters and party apparel",
        "pitch_summary": "Fun holiday and party clothing with humorous designs",
        "current_update": "Expanded beyond Christmas to year-round party apparel with $100M+ revenue",
        "website": "https://tipsyelves.com",
        "logo": "https://images.unsplash.com/photo-1544966503-7cc5ac882d5f?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },

    # Season 6 (2014-2015)
    {
        "id": "bombas",
        "name": "Bombas",
        "season": 6,
        "episode": 1,
        "founders": ["David Heath", "Randy Goldberg"],
        "industry": "Apparel",
        "original_ask": {"amount": 200000, "equity": 5},
        "deal_status": "Got Deal",
        "deal_details": {"amount": 200000, "equity": 17.5, "sharks": ["Daymond John"]},
        "current_status": "Active",
        "current_valuation": 300000000,
        "description": "Comfortable socks with a social mission - one donated for each sold",
        "pitch_summary": "Premium socks designed for comfort with a buy-one-give-one model",
        "current_update": "Generated over $300M in revenue and donated millions of socks to homeless shelters",
        "website": "https://bombas.com",
        "logo": "https://images.unsplash.com/photo-1556906781-9a412961c28c?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },
    {
        "id": "squatty-potty",
        "name": "Squatty Potty",
        "season": 6,
        "episode": 9,
        "founders": ["Bobby Edwards", "Judy Edwards"],
        "industry": "Health & Wellness",
        "original_ask": {"amount": 350000, "equity": 5},
        "deal_status": "Got Deal",
        "deal_details": {"amount": 350000, "equity": 10, "sharks": ["Lori Greiner"]},
        "current_status": "Active",
        "current_valuation": 90000000,
        "description": "Toilet stool designed to improve bathroom posture and health",
        "pitch_summary": "Ergonomic bathroom stool that promotes healthier elimination",
        "current_update": "Viral marketing success with over $90M in sales and international expansion",
        "website": "https://squattypotty.com",
        "logo": "https://images.unsplash.com/photo-1584464491033-06628f3a6b7b?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },
    {
        "id": "tower-paddle-boards",
        "name": "Tower Paddle Boards",
        "season": 6,
        "episode": 10,
        "founders": ["Stephan Aarstol"],
        "industry": "Sports & Recreation",
        "original_ask": {"amount": 150000, "equity": 10},
        "deal_status": "Got Deal",
        "deal_details": {"amount": 150000, "equity": 30, "sharks": ["Mark Cuban"]},
        "current_status": "Active",
        "current_valuation": 40000000,
        "description": "Direct-to-consumer paddle boards at affordable prices",
        "pitch_summary": "High-quality paddle boards sold online at half the retail price",
        "current_update": "Successful D2C model with over $40M in sales and industry recognition",
        "website": "https://towerpaddle.com",
        "logo": "https://images.unsplash.com/photo-1544551763-46a013bb70d5?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },

    # Season 7 (2015-2016)
    {
        "id": "simply-fit-board",
        "name": "Simply Fit Board",
        "season": 7,
        "episode": 6,
        "founders": ["Gloria Hoffman", "Linda Clark"],
        "industry": "Fitness",
        "original_ask": {"amount": 125000, "equity": 15},
        "deal_status": "Got Deal",
        "deal_details": {"amount": 125000, "equity": 20, "sharks": ["Lori Greiner"]},
        "current_status": "Active",
        "current_valuation": 35000000,
        "description": "Balance board for core strengthening and fitness",
        "pitch_summary": "Curved balance board for low-impact core workouts",
        "current_update": "Strong retail presence with over $35M in sales through TV marketing",
        "logo": "https://images.unsplash.com/photo-1571019613454-1cb2f99b2d8b?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },

    # Season 8 (2016-2017)
    {
        "id": "the-comfy",
        "name": "The Comfy",
        "season": 8,
        "episode": 1,
        "founders": ["Brian Speciale", "Michael Speciale"],
        "industry": "Apparel",
        "original_ask": {"amount": 50000, "equity": 20},
        "deal_status": "Got Deal",
        "deal_details": {"amount": 50000, "equity": 30, "sharks": ["Barbara Corcoran"]},
        "current_status": "Active",
        "current_valuation": 80000000,
        "description": "Oversized hoodie blanket hybrid",
        "pitch_summary": "Wearable blanket that combines the comfort of a blanket with hoodie convenience",
        "current_update": "Viral success with over $80M in sales and major retail presence",
        "website": "https://thecomfy.com",
        "logo": "https://images.unsplash.com/photo-1544966503-7cc5ac882d5f?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },
    {
        "id": "bantam-bagels",
        "name": "Bantam Bagels",
        "season": 8,
        "episode": 18,
        "founders": ["Nick Olson", "Elyse Olson"],
        "industry": "Food & Beverage",
        "original_ask": {"amount": 275000, "equity": 10},
        "deal_status": "Got Deal",
        "deal_details": {"amount": 275000, "equity": 25, "sharks": ["Lori Greiner"]},
        "current_status": "Acquired",
        "current_valuation": 34000000,
        "description": "Stuffed mini bagels with cream cheese filling",
        "pitch_summary": "Bite-sized bagels pre-filled with cream cheese in various flavors",
        "current_update": "Acquired by T. Marzetti Company, now sold in major grocery chains nationwide",
        "logo": "https://images.unsplash.com/photo-1509440159596-0249088772ff?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },

    # Season 9 (2017-2018)
    {
        "id": "lumio",
        "name": "Lumio",
        "season": 9,
        "episode": 15,
        "founders": ["Max Gunawan"],
        "industry": "Home & Garden",
        "original_ask": {"amount": 250000, "equity": 15},
        "deal_status": "Got Deal",
        "deal_details": {"amount": 250000, "equity": 18, "sharks": ["Robert Herjavec"]},
        "current_status": "Active",
        "current_valuation": 25000000,
        "description": "Book-shaped LED lamp that opens like a book",
        "pitch_summary": "Innovative lamp designed to look like a book that opens to reveal LED lighting",
        "current_update": "International success with design awards and strong online sales",
        "website": "https://lumio.com",
        "logo": "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },

    # Season 10 (2018-2019)
    {
        "id": "ezpz",
        "name": "Ezpz",
        "season": 10,
        "episode": 4,
        "founders": ["Lindsey Laurain"],
        "industry": "Baby Products",
        "original_ask": {"amount": 200000, "equity": 10},
        "deal_status": "Got Deal",
        "deal_details": {"amount": 200000, "equity": 12, "sharks": ["Lori Greiner"]},
        "current_status": "Active",
        "current_valuation": 45000000,
        "description": "Silicone placemats that suction to tables to prevent spills",
        "pitch_summary": "One-piece silicone placemat and plate that sticks to high chair trays",
        "current_update": "Major success in baby product market with international expansion",
        "website": "https://ezpzfun.com",
        "logo": "https://images.unsplash.com/photo-1544966503-7cc5ac882d5f?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },

    # Season 11 (2019-2020)
    {
        "id": "blueland",
        "name": "Blueland",
        "season": 11,
        "episode": 4,
        "founders": ["Sarah Paiji Yoo", "Syed Naqvi"],
        "industry": "Household Products",
        "original_ask": {"amount": 270000, "equity": 2},
        "deal_status": "Got Deal",
        "deal_details": {"amount": 270000, "equity": 3, "sharks": ["Kevin O'Leary"]},
        "current_status": "Active",
        "current_valuation": 120000000,
        "description": "Eco-friendly cleaning products in tablet form",
        "pitch_summary": "Sustainable cleaning tablets that dissolve in reusable bottles",
        "current_update": "Rapid growth in eco-conscious market with $120M+ valuation",
        "website": "https://blueland.com",
        "logo": "https://images.unsplash.com/photo-1556228578-8c89e6adf883?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },

    # Season 12 (2020-2021)
    {
        "id": "everlywell",
        "name": "Everlywell",
        "season": 12,
        "episode": 8,
        "founders": ["Julia Cheek"],
        "industry": "Healthcare",
        "original_ask": {"amount": 1000000, "equity": 5},
        "deal_status": "Got Deal",
        "deal_details": {"amount": 1000000, "equity": 5, "sharks": ["Lori Greiner"]},
        "current_status": "Active",
        "current_valuation": 3200000000,
        "description": "At-home health testing kits",
        "pitch_summary": "Direct-to-consumer health testing with lab-quality results at home",
        "current_update": "Became a unicorn with $3.2B valuation, major telehealth player during COVID-19",
        "website": "https://everlywell.com",
        "logo": "https://images.unsplash.com/photo-1559757148-5c350d0d3c56?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },
    {
        "id": "inboard-technology",
        "name": "Inboard Technology",
        "season": 12,
        "episode": 3,
        "founders": ["Ryan Evans", "Theo Cerboneschi"],
        "industry": "Transportation",
        "original_ask": {"amount": 750000, "equity": 8},
        "deal_status": "Got Deal",
        "deal_details": {"amount": 750000, "equity": 9, "sharks": ["Mark Cuban", "Lori Greiner"]},
        "current_status": "Closed",
        "description": "Electric skateboard with swappable batteries",
        "pitch_summary": "High-performance electric skateboard with removable battery packs",
        "current_update": "Company shut down due to manufacturing challenges and market competition",
        "logo": "https://images.unsplash.com/photo-1544551763-46a013bb70d5?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },

    # Season 13 (2021-2022)
    {
        "id": "chirps-chips",
        "name": "Chirps Chips",
        "season": 13,
        "episode": 2,
        "founders": ["Laura D'Asaro", "Rose Wang", "Meryl Natow"],
        "industry": "Food & Beverage",
        "original_ask": {"amount": 100000, "equity": 15},
        "deal_status": "Got Deal",
        "deal_details": {"amount": 100000, "equity": 15, "sharks": ["Mark Cuban"]},
        "current_status": "Active",
        "current_valuation": 8000000,
        "description": "Cricket-based protein chips",
        "pitch_summary": "Sustainable snack chips made with cricket flour for protein",
        "current_update": "Growing in alternative protein market with retail expansion",
        "website": "https://chirpschips.com",
        "logo": "https://images.unsplash.com/photo-1571019613454-1cb2f99b2d8b?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },
    {
        "id": "nooci",
        "name": "Nooci",
        "season": 13,
        "episode": 7,
        "founders": ["Julia Xu"],
        "industry": "Health & Wellness",
        "original_ask": {"amount": 250000, "equity": 10},
        "deal_status": "Got Deal",
        "deal_details": {"amount": 250000, "equity": 15, "sharks": ["Lori Greiner"]},
        "current_status": "Active",
        "current_valuation": 15000000,
        "description": "Traditional Chinese medicine supplements",
        "pitch_summary": "Modern approach to traditional Chinese herbal remedies",
        "current_update": "Strong growth in wellness market with expanding product line",
        "website": "https://nooci.com",
        "logo": "https://images.unsplash.com/photo-1556228578-8c89e6adf883?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },

    # Season 14 (2022-2023)
    {
        "id": "youthforia",
        "name": "Youthforia",
        "season": 14,
        "episode": 5,
        "founders": ["Fiona Co Chan"],
        "industry": "Beauty",
        "original_ask": {"amount": 400000, "equity": 8},
        "deal_status": "Got Deal",
        "deal_details": {"amount": 400000, "equity": 12, "sharks": ["Lori Greiner"]},
        "current_status": "Active",
        "current_valuation": 40000000,
        "description": "Gen Z-focused makeup brand with skincare benefits",
        "pitch_summary": "Color-changing makeup that adapts to your skin tone",
        "current_update": "Viral TikTok success with rapid growth in Gen Z market",
        "website": "https://youthforia.com",
        "logo": "https://images.unsplash.com/photo-1556228578-8c89e6adf883?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },
    {
        "id": "cupboard-pro",
        "name": "Cupboard Pro",
        "season": 14,
        "episode": 12,
        "founders": ["Keith Young"],
        "industry": "Home & Garden",
        "original_ask": {"amount": 50000, "equity": 20},
        "deal_status": "Got Deal",
        "deal_details": {"amount": 50000, "equity": 25, "sharks": ["Lori Greiner"]},
        "current_status": "Active",
        "current_valuation": 3000000,
        "description": "Magnetic spice rack system for kitchen organization",
        "pitch_summary": "Space-saving magnetic spice storage that mounts inside cabinets",
        "current_update": "Steady growth in kitchen organization market",
        "website": "https://cupboardpro.com",
        "logo": "https://images.unsplash.com/photo-1584464491033-06628f3a6b7b?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },

    # Season 15 (2023-2024)
    {
        "id": "kahawa-1893",
        "name": "Kahawa 1893",
        "season": 15,
        "episode": 3,
        "founders": ["Margaret Nyamumbo"],
        "industry": "Food & Beverage",
        "original_ask": {"amount": 350000, "equity": 8},
        "deal_status": "Got Deal",
        "deal_details": {"amount": 350000, "equity": 10, "sharks": ["Emma Grede"]},
        "current_status": "Active",
        "current_valuation": 35000000,
        "description": "African coffee brand supporting women farmers",
        "pitch_summary": "Premium African coffee with direct trade supporting female farmers",
        "current_update": "Expanding retail presence with strong social impact mission",
        "website": "https://kahawa1893.com",
        "logo": "https://images.unsplash.com/photo-1578985545062-69928b1d9587?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },
    {
        "id": "deux",
        "name": "Deux",
        "season": 15,
        "episode": 8,
        "founders": ["Sabeena Ladha"],
        "industry": "Food & Beverage",
        "original_ask": {"amount": 300000, "equity": 10},
        "deal_status": "Got Deal",
        "deal_details": {"amount": 300000, "equity": 15, "sharks": ["Mark Cuban"]},
        "current_status": "Active",
        "current_valuation": 20000000,
        "description": "Better-for-you cookie dough that's safe to eat raw",
        "pitch_summary": "Edible cookie dough made with clean ingredients",
        "current_update": "Strong growth in better-for-you snack category",
        "website": "https://deuxfoods.com",
        "logo": "https://images.unsplash.com/photo-1578985545062-69928b1d9587?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },

    # Season 16 (2024-2025)
    {
        "id": "fryaway",
        "name": "FryAway",
        "season": 16,
        "episode": 2,
        "founders": ["Laura Lady"],
        "industry": "Household Products",
        "original_ask": {"amount": 250000, "equity": 5},
        "deal_status": "Got Deal",
        "deal_details": {"amount": 250000, "equity": 22, "sharks": ["Lori Greiner"]},
        "current_status": "Active",
        "current_valuation": 12000000,
        "description": "Plant-based powder that solidifies cooking oil for easy disposal",
        "pitch_summary": "Eco-friendly solution to dispose of used cooking oil safely",
        "current_update": "Rapid retail expansion with strong environmental impact messaging",
        "website": "https://fryaway.com",
        "logo": "https://images.unsplash.com/photo-1556228578-8c89e6adf883?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },

    # Later additions, various seasons
    {
        "id": "readerest",
        "name": "ReadeREST",
        "season": 2,
        "episode": 4,
        "founders": ["Rick Hopper"],
        "industry": "Accessories",
        "original_ask": {"amount": 150000, "equity": 15},
        "deal_status": "Got Deal",
        "deal_details": {"amount": 150000, "equity": 65, "sharks": ["Lori Greiner"]},
        "current_status": "Active",
        "current_valuation": 8000000,
        "description": "Magnetic eyeglass holder that clips to clothing",
        "pitch_summary": "Simple magnetic device to keep reading glasses accessible",
        "current_update": "Steady sales through infomercials and retail partnerships",
        "logo": "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },
    {
        "id": "sleep-styler",
        "name": "Sleep Styler",
        "season": 8,
        "episode": 6,
        "founders": ["Tara Brown"],
        "industry": "Beauty",
        "original_ask": {"amount": 75000, "equity": 15},
        "deal_status": "Got Deal",
        "deal_details": {"amount": 75000, "equity": 25, "sharks": ["Lori Greiner"]},
        "current_status": "Active",
        "current_valuation": 15000000,
        "description": "Heat-free hair curlers you can sleep in",
        "pitch_summary": "Comfortable foam rollers designed for overnight use",
        "current_update": "Strong retail presence with consistent sales growth",
        "logo": "https://images.unsplash.com/photo-1556228578-8c89e6adf883?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },
    {
        "id": "bottle-breacher",
        "name": "Bottle Breacher",
        "season": 6,
        "episode": 7,
        "founders": ["Eli Crane"],
        "industry": "Accessories",
        "original_ask": {"amount": 150000, "equity": 15},
        "deal_status": "Got Deal",
        "deal_details": {"amount": 150000, "equity": 15, "sharks": ["Kevin O'Leary", "Mark Cuban"]},
        "current_status": "Active",
        "current_valuation": 12000000,
        "description": "Bottle openers made from .50 caliber bullets by veterans",
        "pitch_summary": "Patriotic bottle openers crafted by military veterans",
        "current_update": "Strong patriotic market with steady veteran employment mission",
        "website": "https://bottlebreacher.com",
        "logo": "https://images.unsplash.com/photo-1449824913935-59a10b8d2000?w=100&h=100&fit=crop&crop=center",
        "last_updated": "2024-01-15"
    },
]

SHARKS = [
    "Mark Cuban",
    "Barbara Corcoran",
    "Kevin O'Leary",
    "Lori Greiner",
    "Robert Herjavec",
    "Daymond John",
    "Emma Grede",
    "Daniel Lubetzky",
    "Kevin Hart",
    "Nirav Tolia",
]

ALL_SEASONS = list(range(1, 17))
INDUSTRIES = [i.value for i in Industry]

# default refresh targets
MAJOR_COMPANIES = [
    "Scrub Daddy", "Bombas", "Ring", "Kodiak Cakes", "Squatty Potty",
    "The Comfy", "Everlywell", "Blueland", "Cousins Maine Lobster",
    "Tower Paddle Boards", "Tipsy Elves", "Drop Stop", "Simply Fit Board",
    "Lumio", "Ezpz", "Bantam Bagels", "Groovebook", "PiperWai",
    "Youthforia", "Kahawa 1893", "Deux", "Chirps Chips", "Nooci",
    "FryAway", "Sleep Styler", "Bottle Breacher", "ReadeREST",
]


def load_companies(path=COMPANIES_JSON):
    """Validated records from the JSON override at `path`, else the bundled set."""
    rows = COMPANIES
    if path and os.path.exists(path):
        with open(path, encoding="utf-8") as f:
            rows = json.load(f)
        log.info("loaded %d companies from %s", len(rows), path)
    return [Company.model_validate(r) for r in rows]

"""
Campaign templates by industry.

Order matters: campaign and ad group ids are ordinals into these lists, so
reordering entries changes every generated id and every metrics seed.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class CampaignTemplate:
    name: str
    type: str                           # SEARCH | DISPLAY | VIDEO | SHOPPING
    ad_group_patterns: Tuple[str, ...]


CAMPAIGN_TEMPLATES: Dict[str, List[CampaignTemplate]] = {
    "ecommerce": [
        CampaignTemplate("Brand Awareness", "SEARCH", ("Brand Terms", "Company Name", "Brand + Product")),
        CampaignTemplate("Electronics", "SEARCH", ("Laptops", "Smartphones", "Tablets", "Accessories")),
        CampaignTemplate("Home & Garden", "SEARCH", ("Furniture", "Outdoor", "Decor", "Kitchen")),
        CampaignTemplate("Shopping - Best Sellers", "SHOPPING", ("Top Products", "Trending Items", "Sale Items")),
        CampaignTemplate("Retargeting - Display", "DISPLAY", ("Cart Abandoners", "Past Buyers", "Product Viewers")),
    ],
    "saas": [
        CampaignTemplate("Product - Core Features", "SEARCH", ("Analytics", "Automation", "Integration", "Reporting")),
        CampaignTemplate("Competitor Targeting", "SEARCH", ("vs Competitor A", "vs Competitor B", "Alternative To")),
        CampaignTemplate("Free Trial Campaigns", "SEARCH", ("Free Trial", "Demo Request", "Get Started")),
        CampaignTemplate("Enterprise Solutions", "SEARCH", ("Enterprise", "Team Plans", "Custom Solutions")),
        CampaignTemplate("Thought Leadership - Video", "VIDEO", ("Tutorials", "Webinars", "Case Studies")),
    ],
    "local_services": [
        CampaignTemplate("Emergency Services", "SEARCH", ("24/7 Emergency", "Same Day Service", "Urgent Repairs")),
        CampaignTemplate("Service Types", "SEARCH", ("Repairs", "Installation", "Maintenance", "Inspection")),
        CampaignTemplate("Location Targeting", "SEARCH", ("Downtown", "Suburbs", "Metro Area", "Nearby")),
        CampaignTemplate("Seasonal Promotions", "SEARCH", ("Winter Specials", "Summer Deals", "Holiday Offers")),
    ],
    "travel": [
        CampaignTemplate("Destinations - Beach", "SEARCH", ("Caribbean", "Mediterranean", "Hawaii", "Mexico")),
        CampaignTemplate("Destinations - Adventure", "SEARCH", ("Mountain Trips", "Safari", "Hiking Tours", "Ski Resorts")),
        CampaignTemplate("Travel Deals", "SEARCH", ("Last Minute", "Early Bird", "Package Deals", "Flash Sales")),
        CampaignTemplate("Video - Destination Showcase", "VIDEO", ("Resort Tours", "City Guides", "Travel Tips")),
        CampaignTemplate("Display - Retargeting", "DISPLAY", ("Search Abandoners", "Past Travelers", "Newsletter Subscribers")),
    ],
    "finance": [
        CampaignTemplate("Investment Products", "SEARCH", ("Retirement Planning", "Stock Trading", "Mutual Funds", "ETFs")),
        CampaignTemplate("Banking Services", "SEARCH", ("Savings Accounts", "Checking Accounts", "Credit Cards", "Loans")),
        CampaignTemplate("Financial Education", "SEARCH", ("Investing Tips", "Tax Planning", "Budgeting", "Wealth Management")),
        CampaignTemplate("High Net Worth", "SEARCH", ("Private Banking", "Wealth Advisory", "Estate Planning")),
    ],
}

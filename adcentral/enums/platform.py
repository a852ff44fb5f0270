"""
Advertising platform enum
"""
from enum import Enum

class Platform(str, Enum):
    """Platforms a campaign can run on"""
    FACEBOOK = "Facebook"
    INSTAGRAM = "Instagram"
    GOOGLE_ADS = "Google Ads"
    YOUTUBE = "YouTube"
    LINKEDIN = "LinkedIn"
    TIKTOK = "TikTok"
    TWITTER = "Twitter"

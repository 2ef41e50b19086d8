"""
English / Hindi string lookup for user-visible text.
"""

LANGUAGES = {"en": "English", "hi": "हिंदी"}

TRANSLATIONS: dict[str, dict[str, str]] = {
    "en": {
        # Landing
        "landing.title": "PM Internship Scheme",
        "landing.subtitle": "Find Perfect Internships Made For You",
        "landing.description": (
            "Get personalized internship recommendations based on your skills, "
            "interests, and location. Simple, fast, and designed for everyone."
        ),
        "landing.cta": "Get My Recommendations",
        "landing.tagline": "Connecting Youth to Opportunities",
        # Profile form
        "profile.title": "Tell Us About Yourself",
        "profile.subtitle": "Help us find the best internships for you",
        "profile.education": "Education Level",
        "profile.education.placeholder": "Select your education level",
        "profile.skills": "Skills",
        "profile.skills.placeholder": "Select your skills",
        "profile.interests": "Interests",
        "profile.interests.placeholder": "What interests you?",
        "profile.location": "Preferred Location",
        "profile.location.placeholder": "Select location",
        "profile.submit": "Find Internships",
        # Recommendations
        "recommendations.title": "Recommended for You",
        "recommendations.subtitle": "We found {count} internships perfect for your profile",
        "recommendations.apply": "Apply Now",
        "recommendations.stipend": "₹{amount}/month",
        "recommendations.reason": "Why recommended: {reason}",
        "recommendations.back": "Edit Profile",
        "recommendations.empty.title": "No Recommendations Found",
        "recommendations.empty.body": (
            "We couldn't find internships matching your criteria. "
            "Try adjusting your preferences."
        ),
        # Common
        "common.language": "Language",
        "common.loading": "Loading...",
        "common.error": "Something went wrong. Please try again.",
    },
    "hi": {
        "landing.title": "पीएम इंटर्नशिप योजना",
        "landing.subtitle": "आपके लिए बनाई गई सही इंटर्नशिप खोजें",
        "landing.description": (
            "अपने कौशल, रुचियों और स्थान के आधार पर व्यक्तिगत इंटर्नशिप सिफारिशें प्राप्त करें। "
            "सरल, तेज़, और सभी के लिए डिज़ाइन किया गया।"
        ),
        "landing.cta": "मेरी सिफारिशें पाएं",
        "landing.tagline": "युवाओं को अवसरों से जोड़ना",
        "profile.title": "अपने बारे में बताएं",
        "profile.subtitle": "आपके लिए सबसे अच्छी इंटर्नशिप खोजने में हमारी मदद करें",
        "profile.education": "शिक्षा स्तर",
        "profile.education.placeholder": "अपना शिक्षा स्तर चुनें",
        "profile.skills": "कौशल",
        "profile.skills.placeholder": "अपने कौशल चुनें",
        "profile.interests": "रुचियां",
        "profile.interests.placeholder": "आपकी रुचि किसमें है?",
        "profile.location": "पसंदीदा स्थान",
        "profile.location.placeholder": "स्थान चुनें",
        "profile.submit": "इंटर्नशिप खोजें",
        "recommendations.title": "आपके लिए सुझाव",
        "recommendations.subtitle": "हमने आपकी प्रोफाइल के लिए {count} इंटर्नशिप पाई",
        "recommendations.apply": "आवेदन करें",
        "recommendations.stipend": "₹{amount}/महीना",
        "recommendations.reason": "क्यों सुझाया गया: {reason}",
        "recommendations.back": "प्रोफाइल संपादित करें",
        "recommendations.empty.title": "कोई सुझाव नहीं मिला",
        "recommendations.empty.body": (
            "हमें आपके मानदंडों से मेल खाती इंटर्नशिप नहीं मिली। "
            "अपनी प्राथमिकताएं बदलकर देखें।"
        ),
        "common.language": "भाषा",
        "common.loading": "लोड हो रहा है...",
        "common.error": "कुछ गलत हुआ। कृपया पुनः प्रयास करें।",
    },
}

SECTOR_ICONS = {
    "technology": "💻",
    "it": "💻",
    "finance": "💰",
    "banking": "💰",
    "education": "📚",
    "teaching": "📚",
    "healthcare": "🏥",
    "medical": "🏥",
    "government": "🏛️",
    "public sector": "🏛️",
    "non-profit": "🤝",
    "ngo": "🤝",
    "media": "📺",
    "journalism": "📺",
    "design": "🎨",
    "creative": "🎨",
}
DEFAULT_SECTOR_ICON = "💼"


class Translator:
    """Looks up UI strings for one language."""

    def __init__(self, language: str = "en"):
        if language not in TRANSLATIONS:
            raise ValueError(f"Unsupported language: {language}")
        self.language = language

    def t(self, key: str, **params) -> str:
        """
        Translate a key, substituting ``{param}`` placeholders.

        Unknown keys are returned unchanged.
        """
        text = TRANSLATIONS[self.language].get(key, key)
        for name, value in params.items():
            text = text.replace(f"{{{name}}}", str(value))
        return text


def sector_icon(sector: str) -> str:
    return SECTOR_ICONS.get(sector.lower(), DEFAULT_SECTOR_ICON)

DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
DEFAULT_MODEL = "gpt-4"
DEFAULT_MAX_TOKENS = 350
DEFAULT_TEMPERATURE = 0.8

HISTORY_CAPACITY = 50
MAX_BREAKDOWNS = 5

WORDS_PER_MINUTE = 200
CODE_SPAN_LIMIT = 50
CODE_SPAN_HEAD = 30
CODE_SPAN_TAIL = 15

OVERVIEW_PLACEHOLDER = "Here's the explanation:"

EXPLAIN_USER_PROMPT = "Explain this code with the specified format and tone:\n\n```\n{code}\n```"
SOCIAL_USER_PROMPT = "Create a social media post for this code with the specified format and tone:\n\n```\n{code}\n```"

TONE_PROMPTS = {
    "baby": """
You're explaining code to a 5-year-old! Be super simple, fun, and use analogies they'd understand. Use emojis and keep it playful!

Format your response like this:
## 🎯 Quick Summary (1-2 sentences)
[Brief overview in simple terms]

## 🔍 Line by Line
[Go through each important line with fun explanations]

Keep the total response under 150 words and make it engaging!
""",
    "sarcastic": """
You're a sarcastic senior developer doing code review. Be witty, snarky, but still helpful. Roast bad practices but teach something useful!

Format your response like this:
## 🎯 The Gist
[Sarcastic but accurate summary in 1-2 sentences]

## 🔍 Line by Line Roast
[Go through key lines with sarcastic commentary]

Keep it under 150 words and make it brutally honest but educational!
""",
    "influencer": """
You're a Gen-Z tech influencer explaining code! Use modern slang, be enthusiastic, and make coding sound like the hottest trend. Use terms like "bestie", "no cap", "slay", "periodt"!

Format your response like this:
## 🎯 The Tea ☕
[Enthusiastic overview in 1-2 sentences]

## 🔍 Breaking It Down, Bestie
[Line by line with Gen-Z energy]

Keep it under 150 words and make coding sound absolutely iconic!
""",
    "professor": """
You're a brilliant CS professor explaining code clearly and academically. Use proper terminology but keep it accessible and engaging.

Format your response like this:
## 🎯 Executive Summary
[Professional but clear overview in 1-2 sentences]

## 🔍 Technical Breakdown
[Systematic line-by-line analysis]

Keep it under 150 words, precise and educational!
""",
}

SOCIAL_SECTION_FORMAT = """
## CODE_OVERVIEW
[{overview}]

## QUICK_SUMMARY
[{summary}]

## BREAKDOWN_1
[{breakdown} the first main part of the code]

## BREAKDOWN_2
[{breakdown} the second main part of the code]

## BREAKDOWN_3
[{breakdown} the third main part of the code]

Only include BREAKDOWN sections that are actually needed. {closing}
"""

SOCIAL_PROMPTS = {
    "baby": "Create a social media post explaining this code to a 5-year-old. Structure your response exactly like this:\n"
    + SOCIAL_SECTION_FORMAT.format(
        overview="Write a short, simple explanation of what this code does overall. Use emojis and keep it playful! 2-3 sentences max.",
        summary="Write a very brief summary perfect for a social media card. 1-2 sentences. Make it engaging with emojis!",
        breakdown="In simple terms with emojis, explain",
        closing="Keep each section concise and social media friendly!",
    ),
    "sarcastic": "Craft a witty and sarcastic social media post reviewing this code. Structure your response exactly like this:\n"
    + SOCIAL_SECTION_FORMAT.format(
        overview="Write a snarky but insightful overview of what this code does. 2-3 sentences max.",
        summary="Write a brief, witty summary perfect for a social media card. 1-2 sentences. Be snarky but informative!",
        breakdown="With clever insights, sarcastically explain",
        closing="Keep each section punchy and social media ready!",
    ),
    "influencer": "Write an enthusiastic social media post about this code as if you're a Gen-Z influencer. Structure your response exactly like this:\n"
    + SOCIAL_SECTION_FORMAT.format(
        overview="Write an excited overview of what this code does using modern slang and emojis. 2-3 sentences max.",
        summary="Write a trendy, engaging summary perfect for a social media card. 1-2 sentences. Make it sound cool!",
        breakdown="Using Gen-Z slang and enthusiasm, explain",
        closing="Keep it fresh and social media worthy!",
    ),
    "professor": "Compose a clear and academic social media post explaining this code. Structure your response exactly like this:\n"
    + SOCIAL_SECTION_FORMAT.format(
        overview="Write a clear, academic overview of what this code accomplishes. 2-3 sentences max.",
        summary="Write a concise, professional summary perfect for a social media card. 1-2 sentences. Keep it accessible!",
        breakdown="With proper terminology but accessible language, explain",
        closing="Keep each section clear and educational!",
    ),
}

CARD_TEMPLATES = [
    {"id": "modern", "name": "Modern Gradient", "description": "Clean gradient design"},
    {"id": "developer", "name": "Developer Dark", "description": "Dark theme for developers"},
    {"id": "minimal", "name": "Minimal White", "description": "Clean minimal design"},
    {"id": "retro", "name": "Retro Neon", "description": "Vibrant neon colors"},
    {"id": "professional", "name": "Professional", "description": "LinkedIn-ready design"},
]
DEFAULT_CARD_TEMPLATE = "modern"

TONE_EMOJIS = {
    "baby": "🧒",
    "sarcastic": "💀",
    "influencer": "💅",
    "professor": "👨‍🏫",
}

OVERVIEW_HOOKS = {
    "baby": "🧒 Ever wondered what this code does? Let me explain it like you're 5! ",
    "sarcastic": "💀 This code looks complicated, but it's actually... ",
    "influencer": "💅 OMG, this code is giving me LIFE! Here's the tea: ",
    "professor": "👨‍🏫 Let's analyze this code systematically: ",
}

BREAKDOWN_HOOKS = {
    "baby": ["🧒 This part is like...", "🎈 And then we have...", "🎪 Here's the fun part...", "🎨 Look at this...", "🎯 This does something cool...", "🌟 And finally..."],
    "sarcastic": ["💀 Of course, this line...", "🎭 And here we go...", "🎪 This is where it gets interesting...", "🎯 Because why not...", "🌟 And the grand finale...", "🎨 The cherry on top..."],
    "influencer": ["💅 This part is literally...", "✨ And then it's giving...", "🔥 This is where the magic happens...", "💫 It's doing this thing...", "🌟 And it's serving...", "💎 The finale is..."],
    "professor": ["📚 This component serves to...", "🔬 The function implements...", "📖 This section establishes...", "🎓 The mechanism operates by...", "🔍 This element facilitates...", "📝 Finally, this ensures..."],
}
DEFAULT_BREAKDOWN_HOOK = "🔍 This part: "

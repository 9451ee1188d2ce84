"""Canned roasts served when no LLM credential is configured."""
from __future__ import annotations

import random
from typing import Optional

DEMO_ROASTS = (
    """🔥 RESUME ROAST INCOMING 🔥

Well, well, well... Look what the career cat dragged in! 📄 Your resume "{filename}" is like a dating profile from 2003: technically functional but missing all the sparkle! ✨

🎭 **The Good News:** You actually have a resume! That puts you ahead of 30% of job applicants who show up with a napkin and a dream.

🎯 **The Brutal Truth:** Your resume reads like it was written by a robot who learned human language from LinkedIn posts. "Responsible for managing tasks"? That's like saying "I breathed air and occasionally blinked."

🚀 **What You Need to Fix:**
• Add some NUMBERS! "Increased efficiency" means nothing. "Increased efficiency by 47% while reducing costs by $15K" is where the conversation starts! 💰
• Your skills section looks like keyword soup. Keep the ones you can actually do without googling "how to" first! 🤔
• Work experience needs more ACTION verbs. "Led," "Achieved," "Revolutionized," not "Was responsible for existing near computers."

💎 **Pro Tip:** Your resume should tell a story, not read like a grocery list. Make it so good that recruiters fight over you like it's Black Friday and you're the last PlayStation! 🎮

💯 FINAL SCORE: 73/100

*Note: This is a demo response. Add your GROQ_API_KEY to get real AI-powered roasts! 🔥*""",
    """🔥 RESUME ROAST INCOMING 🔥

Holy career crisis, Batman! 🦇 Your resume "{filename}" just landed on my desk and I need sunglasses because the lack of achievements is BLINDING! ☀️

🎪 **First Impressions:** It's like watching a magician who forgot their tricks. You've got the setup, but where's the "ta-da" moment?

🍕 **The Pizza Analogy:** Your resume is like ordering pizza and getting just the crust. Technically it's food, but where's the cheese? The toppings? The reason anyone actually wants it?

🎯 **Critical Issues:**
• Your summary reads like a horoscope: vague enough to apply to anyone! "Detail-oriented professional"? Show me the details that prove it! 📊
• Employment gaps with no explanation. Did you discover time travel? Were you in witness protection? Give us SOMETHING! ⏰
• Skills listed with no proof of using them. It's like claiming you can cook while your smoke detector disagrees! 🔥

🚀 **Emergency Fixes Needed:**
• Quantify EVERYTHING. Turn "improved processes" into "streamlined 5 processes, saving 20 hours weekly"
• Add personality! You're not a robot (I hope). Let some human shine through! 🤖➡️👨
• Use active voice. "I led", not "was responsible for potentially maybe leading when asked nicely"

💯 FINAL SCORE: 68/100

*Note: This is a demo response. Add your GROQ_API_KEY for brutal AI honesty! 🤖*""",
)


def render_demo_roast(filename: str, rng: Optional[random.Random] = None) -> str:
    rng = rng or random.Random()
    return rng.choice(DEMO_ROASTS).format(filename=filename)

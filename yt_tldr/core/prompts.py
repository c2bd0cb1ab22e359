"""
Prompt templates for summary generation.
"""

from typing import Dict, Optional, Union

from langchain_core.prompts import ChatPromptTemplate, PromptTemplate

from yt_tldr.models.schemas import SummaryLength
from yt_tldr.utils.error_handling import InvalidLength

TITLE_PLACEHOLDER = "%videotitle%"
TITLE_FALLBACK = "Video Title Unknown"
CREATOR_FALLBACK = "The Creator"

summary_template = """
You're tasked with summarizing a YouTube video transcript. 🎥📝
Maintain a **neutral** tone and **never assume anything**. Only summarize what is explicitly stated in the transcript. 🤖
Summarize the key points concisely, using **Smart Sections** with timestamps. ⏳
Avoid phrases like "This appears to be..." or "The speaker mentioned." Only state facts from the transcript. 🚫
If there is an ad section, clearly label it as **[AD]** with the corresponding timestamp. 📢
The Speaker should always be called The Creator unless it's not the main speaker. 👤
In the Summary if you want to display the title of the video, use the placeholder "{placeholder}". Never write the title itself.

📄 **How to structure the summary:**
1️⃣ Start with a **short paragraph** summarizing the overall topic and key takeaways of the video.
2️⃣ Only include **Smart Sections** if there is **enough meaningful information** in that part of the video.
3️⃣ For **each Smart Section**, only include a **title** (without a detailed summary), unless a full summary is necessary.

**Metadata:**
  - **Title:** {title}
  - **Creator:** {creator}

🔧 **Customization:**
- **Length:** {length} summary.
- **Clarity:** Use **clear and engaging** language.
- **Timestamps:** Only include timestamps for **major sections**, not minor points.
- **Emojis:** Include at least one emoji per section for readability!

⚠️ **IMPORTANT MARKDOWN FORMATTING INSTRUCTIONS:** ⚠️
- For bullet lists, use "- " (hyphen followed by space) at the beginning of each line
- For numbered lists, use "1. " (number, period, space) format
- Always add a blank line BEFORE starting any list
- Each list item should be on its own line
- Example proper formatting:

Here's some text.

- First bullet point
- Second bullet point
- Third bullet point

More text here.

1. First numbered item
2. Second numbered item

📌 **Example Format:**

🎬 **Title:** {placeholder}
{creator_line}🎙️ **Speaker(s):** [If available]

📄 **Summary:**
[Brief paragraph summarizing the overall topic and key takeaways of the video.]

📝 **Smart Sections:**

[Timestamp] - 🚀 **[Main Topic]**
[Timestamp] - 💡 **[Another Topic]**
[Timestamp] - 🎯 **[Final Thought]**
[Timestamp] - 📢 **[AD] [Ad Topic]**

ℹ️ **Important:**
- **Do not provide a detailed summary in Smart Sections.** Only include **titles** unless more information is required.
- **Only include a title if the section has enough relevant information to stand alone.**
- **Group related points together** rather than creating too many small, fragmented sections.
- Ensure the **summary matches the selected length ("{length}")**, remains **concise**, and **avoids unnecessary sections!** 🚀🔥
"""

structured_template = """
Summarize the following YouTube video transcript.
Maintain a neutral tone and never assume anything. Only state facts that are explicitly in the transcript.
Refer to the main speaker as The Creator. If you need the video title in the summary text, write "{placeholder}" instead.

Video title: {title}
Creator: {creator}
Summary length: {length}

Fill in the fields as follows:
- summary: a short paragraph with the overall topic and key takeaways, sized for a {length} summary.
- smartSections: only the major sections, in chronological order. For each one give the MM:SS timestamp
  taken from the transcript, a single emoji and a short title. Set isAd to true for advertisement or
  sponsor segments and false otherwise.
- metadata: summaryLength "{length}" and the video title.

Transcript:
---
{transcript}
---
"""

transcript_template = "\n\nTranscript:\n---\n{transcript}\n---\n"

summary_instructions = PromptTemplate.from_template(summary_template)
summary_prompt = ChatPromptTemplate.from_messages([
    ("human", summary_template + transcript_template)
])

structured_instructions = PromptTemplate.from_template(structured_template)
structured_prompt = ChatPromptTemplate.from_messages([
    ("human", structured_template)
])


def validate_length(length: Union[str, SummaryLength]) -> SummaryLength:
    """
    Validate a summary length.

    Raises:
        InvalidLength: If the value is not "short" or "long"
    """
    try:
        return SummaryLength(length)
    except ValueError:
        valid = ", ".join(item.value for item in SummaryLength)
        raise InvalidLength(f"Invalid length specified: \"{length}\". Valid options are: {valid}") from None


def summary_variables(
    summary_length: Union[str, SummaryLength],
    title: Optional[str] = None,
    creator: Optional[str] = None,
) -> Dict[str, str]:
    """Template variables for ``summary_prompt``, without the transcript."""
    return {
        "placeholder": TITLE_PLACEHOLDER,
        "title": title or f"[{TITLE_FALLBACK}]",
        "creator": creator or f"[Creator Name Unknown please refer to as {CREATOR_FALLBACK}]",
        "length": validate_length(summary_length).value,
        "creator_line": f"👤 **Creator:** {creator}\n" if creator else "",
    }


def structured_variables(
    summary_length: Union[str, SummaryLength],
    transcript_text: str,
    title: Optional[str] = None,
    creator: Optional[str] = None,
) -> Dict[str, str]:
    """Template variables for ``structured_prompt``."""
    return {
        "placeholder": TITLE_PLACEHOLDER,
        "title": title or TITLE_FALLBACK,
        "creator": creator or CREATOR_FALLBACK,
        "length": validate_length(summary_length).value,
        "transcript": transcript_text,
    }


def create_summary_prompt(
    summary_length: Union[str, SummaryLength],
    title: Optional[str] = None,
    creator: Optional[str] = None,
) -> str:
    """
    Build the free-text summary instructions.

    The transcript is not part of the prompt; append it with
    ``wrap_transcript``.
    """
    return summary_instructions.format(**summary_variables(summary_length, title, creator))


def wrap_transcript(transcript_text: str) -> str:
    """Delimit transcript text for appending to a free-text prompt."""
    return PromptTemplate.from_template(transcript_template).format(transcript=transcript_text)


def create_structured_prompt(
    summary_length: Union[str, SummaryLength],
    transcript_text: str,
    title: Optional[str] = None,
    creator: Optional[str] = None,
) -> str:
    """Build the shorter prompt used for schema-constrained generation."""
    return structured_instructions.format(
        **structured_variables(summary_length, transcript_text, title, creator)
    )

"""
Plaintext Formatter

Helper functions for formatting a RenderedPreview as markdown-flavoured text,
for terminals and logs.
"""

from typing import List

from folio.contexts.rendering.preview import EducationItem, ExperienceItem, RenderedPreview


def format_header_text(preview: RenderedPreview) -> List[str]:
    """
    Format the header as text lines.

    The profile link is shown as "LinkedIn (<url>)" since text has no anchors.
    """
    header = preview.header
    lines = [f"# {header.name}" if header.name else "#"]
    if header.contact_line:
        lines.append(header.contact_line)
    location_line = header.location_line
    if header.profile_link:
        location_line = f"{location_line} ({header.profile_link.href})"
    if location_line:
        lines.append(location_line)
    return lines


def format_experience_text(item: ExperienceItem) -> List[str]:
    lines = [f"### {item.title}" if item.title else "###", f"*{item.date_range}*"]
    if item.place_line:
        lines.append(item.place_line)
    if item.description:
        lines.append("")
        lines.append(item.description)
    return lines


def format_education_text(item: EducationItem) -> List[str]:
    lines = [f"### {item.degree}" if item.degree else "###"]
    if item.graduation_date:
        lines.append(f"*{item.graduation_date}*")
    if item.place_line:
        lines.append(item.place_line)
    if item.gpa_line:
        lines.append(item.gpa_line)
    return lines


def format_preview_text(preview: RenderedPreview) -> str:
    """
    Format the whole preview as text.

    Args:
        preview: Preview to format

    Returns:
        Markdown-flavoured text with one "##" header per present block
    """
    parts = ["\n".join(format_header_text(preview))]

    if preview.summary is not None:
        parts.append(f"## Professional Summary\n\n{preview.summary}")

    if preview.experience is not None:
        entries = ["\n".join(format_experience_text(item)) for item in preview.experience]
        parts.append("## Experience\n\n" + "\n\n".join(entries))

    if preview.education is not None:
        entries = ["\n".join(format_education_text(item)) for item in preview.education]
        parts.append("## Education\n\n" + "\n\n".join(entries))

    if preview.skills is not None:
        parts.append("## Skills\n\n" + "\n".join(f"- {skill}" for skill in preview.skills))

    return "\n\n".join(parts) + "\n"

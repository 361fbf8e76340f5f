"""
Field rule tables for the record types fetched by the API clients.

Each table maps exact field names to rules; keys that are absent fall back
to the filter's built-in handling (safe fields, email/phone/name/company
key names, free-text scrubbing).
"""
from typing import Callable, Dict, List

from .exceptions import UnknownPresetError
from .rules import (
    AnonymizeCompany,
    AnonymizeName,
    CountedName,
    FieldRule,
    FullRedact,
    PassThrough,
    REDACTED_EMAIL,
    REDACTED_USER_ID,
    TextScrub,
)


def productboard_feature_rules() -> Dict[str, FieldRule]:
    # Feature names are product vocabulary, not people
    return {
        "name": PassThrough(),
        "title": TextScrub(),
        "description": TextScrub(),
        "notes": TextScrub(),
        "customer": AnonymizeCompany(),
        "customer_name": AnonymizeCompany(),
        "user_email": FullRedact(REDACTED_EMAIL),
        "owner_email": FullRedact(REDACTED_EMAIL),
        "memberEmail": FullRedact(REDACTED_EMAIL),
        "memberName": AnonymizeName(),
    }


def productboard_note_rules() -> Dict[str, FieldRule]:
    return {
        "title": TextScrub(),
        "subject": TextScrub(),
        "content": TextScrub(),
        "description": TextScrub(),
        "body": TextScrub(),
        "displayUrl": PassThrough(),
        "externalDisplayUrl": PassThrough(),
        "customer": AnonymizeCompany(),
        "customer_name": AnonymizeCompany(),
        "company": AnonymizeCompany(),
        "author_name": AnonymizeName(),
        "author_email": FullRedact(REDACTED_EMAIL),
        "user_name": AnonymizeName(),
        "user_email": FullRedact(REDACTED_EMAIL),
        "memberName": AnonymizeName(),
        "memberEmail": FullRedact(REDACTED_EMAIL),
    }


def dovetail_project_rules() -> Dict[str, FieldRule]:
    # Project names are free text that may mention contacts
    return {
        "name": TextScrub(),
        "description": TextScrub(),
        "owner_name": AnonymizeName(),
        "owner_email": FullRedact(REDACTED_EMAIL),
        "created_by_name": AnonymizeName(),
        "created_by_email": FullRedact(REDACTED_EMAIL),
    }


def dovetail_insight_rules() -> Dict[str, FieldRule]:
    return {
        "title": TextScrub(),
        "description": TextScrub(),
        "content": TextScrub(),
        "author_name": AnonymizeName(),
        "author_email": FullRedact(REDACTED_EMAIL),
        "participant_name": CountedName(),
        "participant_email": FullRedact(REDACTED_EMAIL),
    }


def dovetail_highlight_rules() -> Dict[str, FieldRule]:
    return {
        "text": TextScrub(),
        "quote": TextScrub(),
        "transcript": TextScrub(),
        "source": TextScrub(),
        "participant_name": CountedName(),
        "participant_email": FullRedact(REDACTED_EMAIL),
        "interviewer_name": CountedName(),
        "interviewer_email": FullRedact(REDACTED_EMAIL),
    }


def _atlassian_user_rules() -> Dict[str, FieldRule]:
    return {
        "accountId": FullRedact(REDACTED_USER_ID),
        "emailAddress": FullRedact(REDACTED_EMAIL),
        "displayName": AnonymizeName(),
    }


def jira_issue_rules() -> Dict[str, FieldRule]:
    rules = _atlassian_user_rules()
    rules.update({
        # status/priority/issuetype objects carry their label under "name"
        "name": PassThrough(),
        "summary": TextScrub(),
    })
    return rules


def confluence_page_rules() -> Dict[str, FieldRule]:
    rules = _atlassian_user_rules()
    rules.update({
        "title": TextScrub(),
        "spaceId": PassThrough(),
        "authorId": FullRedact(REDACTED_USER_ID),
        "ownerId": FullRedact(REDACTED_USER_ID),
    })
    return rules


PRESETS: Dict[str, Callable[[], Dict[str, FieldRule]]] = {
    "productboard.feature": productboard_feature_rules,
    "productboard.note": productboard_note_rules,
    "dovetail.project": dovetail_project_rules,
    "dovetail.insight": dovetail_insight_rules,
    "dovetail.highlight": dovetail_highlight_rules,
    "jira.issue": jira_issue_rules,
    "confluence.page": confluence_page_rules,
}


def available_presets() -> List[str]:
    return sorted(PRESETS)


def get_field_rules(preset: str) -> Dict[str, FieldRule]:
    """
    Build a fresh rule table for a record type.

    Raises:
        UnknownPresetError: if the preset is not registered
    """
    factory = PRESETS.get(preset)
    if factory is None:
        raise UnknownPresetError(preset, available=PRESETS.keys())
    return dict(factory())

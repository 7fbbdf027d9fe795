import itertools

import pytest

from avoca.config import Settings
from avoca.engine.classifier import (
    CaseClassifier,
    classify_category,
    detect_court_level,
    determine_required_lawyer_type,
)
from avoca.errors import EmptyMessageError
from avoca.knowledge import CourtLevel, LawyerType, LegalCategory


# ----------------------------------------------------------------------
# Category
# ----------------------------------------------------------------------


@pytest.mark.parametrize(
    "text, expected",
    [
        ("The police arrested my brother for theft", LegalCategory.CRIMINAL),
        ("I want a divorce and custody of my son", LegalCategory.FAMILY),
        ("My landlord broke our contract", LegalCategory.CIVIL),
        ("Our company is facing bankruptcy", LegalCategory.COMMERCIAL),
        ("The municipality refused my building permit", LegalCategory.ADMINISTRATIVE),
        ("My employer fired me without paying my salary", LegalCategory.LABOR),
        ("My visa expired and I fear deportation", LegalCategory.IMMIGRATION),
        ("أريد الطلاق وحضانة الأطفال", LegalCategory.FAMILY),
        ("تعرضت للسرقة والاعتداء من طرف شخص", LegalCategory.CRIMINAL),
    ],
)
def test_classify_category(text, expected):
    assert classify_category(text) == expected


def test_category_defaults_to_civil_without_matches():
    assert classify_category("") == LegalCategory.CIVIL
    assert classify_category("hello, I need some help please") == LegalCategory.CIVIL


def test_category_is_case_insensitive():
    assert classify_category("DIVORCE") == LegalCategory.FAMILY


def test_category_tie_keeps_first_declared():
    # one criminal keyword, one family keyword
    assert classify_category("the police came about my divorce") == LegalCategory.CRIMINAL
    # one family keyword, one civil keyword
    assert classify_category("divorce contract") == LegalCategory.FAMILY


def test_category_counts_keywords_not_occurrences():
    # "police" three times still scores 1; two distinct labor keywords win.
    text = "police police police, my salary and my job"
    assert classify_category(text) == LegalCategory.LABOR


# ----------------------------------------------------------------------
# Court level
# ----------------------------------------------------------------------


def test_court_level_defaults_to_first_instance():
    assert detect_court_level("my neighbor damaged my fence") == CourtLevel.FIRST_INSTANCE


def test_supreme_court_takes_precedence_over_appeal():
    assert detect_court_level("I want to appeal to the Supreme Court") == CourtLevel.SUPREME_COURT


def test_council_of_state_takes_precedence_over_appeal():
    text = "I lost the appeal and now go to the Council of State"
    assert detect_court_level(text) == CourtLevel.COUNCIL_OF_STATE


def test_supreme_court_takes_precedence_over_council_of_state():
    text = "council of state or cassation?"
    assert detect_court_level(text) == CourtLevel.SUPREME_COURT


@pytest.mark.parametrize(
    "text, expected",
    [
        ("أريد الطعن بالنقض", CourtLevel.SUPREME_COURT),
        ("القضية أمام مجلس الدولة", CourtLevel.COUNCIL_OF_STATE),
        ("قدمت استئناف ضد الحكم", CourtLevel.APPEAL),
    ],
)
def test_court_level_arabic_keywords(text, expected):
    assert detect_court_level(text) == expected


# ----------------------------------------------------------------------
# Lawyer type
# ----------------------------------------------------------------------


@pytest.mark.parametrize(
    "court_level, expected",
    [
        (CourtLevel.FIRST_INSTANCE, LawyerType.REGULAR),
        (CourtLevel.APPEAL, LawyerType.APPEAL),
        (CourtLevel.SUPREME_COURT, LawyerType.SUPREME_COURT),
        (CourtLevel.COUNCIL_OF_STATE, LawyerType.COUNCIL_OF_STATE),
    ],
)
def test_lawyer_type_follows_court_level(court_level, expected):
    for category in LegalCategory:
        assert determine_required_lawyer_type(court_level, category) == expected


def test_lawyer_type_is_total():
    for court_level, category in itertools.product(CourtLevel, LegalCategory):
        assert determine_required_lawyer_type(court_level, category) in set(LawyerType)


def test_administrative_council_of_state():
    assert (
        determine_required_lawyer_type(CourtLevel.COUNCIL_OF_STATE, LegalCategory.ADMINISTRATIVE)
        == LawyerType.COUNCIL_OF_STATE
    )


def test_unknown_court_level_maps_to_regular():
    assert determine_required_lawyer_type("tribunal", LegalCategory.CIVIL) == LawyerType.REGULAR


def test_lawyer_type_accepts_plain_strings():
    assert determine_required_lawyer_type("appeal", "labor") == LawyerType.APPEAL


# ----------------------------------------------------------------------
# Pipeline
# ----------------------------------------------------------------------


def test_fired_from_job():
    result = CaseClassifier(Settings()).classify(
        "I was fired from my job and my salary wasn't paid"
    )
    assert result.category == LegalCategory.LABOR
    assert result.court_level == CourtLevel.FIRST_INSTANCE
    assert result.required_lawyer_type == LawyerType.REGULAR
    assert "Are you currently employed or have you been terminated?" in result.follow_up_questions
    assert len(result.follow_up_questions) == 3


def test_criminal_supreme_court():
    result = CaseClassifier(Settings()).classify(
        "I want to appeal a criminal conviction at the Supreme Court, نقض"
    )
    assert result.category == LegalCategory.CRIMINAL
    assert result.court_level == CourtLevel.SUPREME_COURT
    assert result.required_lawyer_type == LawyerType.SUPREME_COURT
    assert result.follow_up_questions == (
        "Have you been formally charged with any crime?",
        "هل تم توجيه اتهام رسمي لك؟",
        "Do you have a copy of the previous court judgment?",
    )


def test_neighbor_damage():
    result = CaseClassifier(Settings()).classify("my neighbor damaged my property, ضرر")
    assert result.category == LegalCategory.CIVIL
    assert result.court_level == CourtLevel.FIRST_INSTANCE
    assert result.required_lawyer_type == LawyerType.REGULAR
    assert "Civil Law / القانون المدني" in result.explanation


def test_administrative_before_council_of_state():
    result = CaseClassifier(Settings()).classify(
        "The ministry revoked my license, I will go to the council of state"
    )
    assert result.category == LegalCategory.ADMINISTRATIVE
    assert result.court_level == CourtLevel.COUNCIL_OF_STATE
    assert result.required_lawyer_type == LawyerType.COUNCIL_OF_STATE


def test_classification_is_deterministic():
    clf = CaseClassifier(Settings())
    text = "My company partner committed fraud and I want to appeal"
    assert clf.classify(text) == clf.classify(text)


@pytest.mark.parametrize("message", [None, "", "   ", "\n\t "])
def test_empty_message_is_rejected(message):
    with pytest.raises(EmptyMessageError):
        CaseClassifier(Settings()).classify(message)


def test_history_ignored_by_default():
    history = [{"role": "user", "content": "My employer fired me last week"}]
    result = CaseClassifier(Settings()).classify("What should I do about the appeal?", history)
    assert result.category == LegalCategory.CIVIL
    assert result.court_level == CourtLevel.APPEAL


def test_history_used_when_enabled():
    clf = CaseClassifier(Settings(use_conversation_history=True))
    history = [
        {"role": "ai", "content": "Did the police get involved?"},
        {"role": "user", "content": "My employer fired me last week"},
    ]
    result = clf.classify("What should I do about the appeal?", history)
    # assistant turns do not count, otherwise "police" would tie and win
    assert result.category == LegalCategory.LABOR
    assert result.court_level == CourtLevel.APPEAL
    assert result.required_lawyer_type == LawyerType.APPEAL

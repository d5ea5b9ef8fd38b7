"""
PICOTS Assistant - Internationalization (i18n) Module
=====================================================
Bilingual text support for English and Indonesian.
"""

from typing import Optional, Dict

# Supported languages
SUPPORTED_LANGUAGES = {
    "en": "English",
    "id": "Bahasa Indonesia"
}

# Default language
_current_language = "en"

# ============================================================================
# BILINGUAL TEXT DICTIONARY
# ============================================================================

TEXTS: Dict[str, Dict[str, str]] = {
    # -------------------------------------------------------------------------
    # General
    # -------------------------------------------------------------------------
    "status_completed": {
        "en": "Completed",
        "id": "Selesai"
    },
    "status_not_defined": {
        "en": "Not defined",
        "id": "Belum diisi"
    },
    "severity_critical": {
        "en": "Critical",
        "id": "Kritis"
    },
    "severity_moderate": {
        "en": "Moderate",
        "id": "Sedang"
    },
    "framework_looks_good": {
        "en": "Your framework looks good!",
        "id": "Kerangka Anda sudah baik!"
    },
    "no_issues_found": {
        "en": "No significant methodological issues were identified. Your PICOTS framework is well-defined.",
        "id": "Tidak ditemukan masalah metodologis yang berarti. Kerangka PICOTS Anda sudah terdefinisi dengan baik."
    },

    # -------------------------------------------------------------------------
    # Pitfalls - Population
    # -------------------------------------------------------------------------
    "issue_population_missing": {
        "en": "No population defined",
        "id": "Populasi belum didefinisikan"
    },
    "rec_population_missing": {
        "en": "Clearly specify inclusion and exclusion criteria",
        "id": "Tentukan kriteria inklusi dan eksklusi dengan jelas"
    },
    "issue_population_vague": {
        "en": "Vague population description",
        "id": "Deskripsi populasi terlalu umum"
    },
    "rec_population_vague": {
        "en": "Provide more detailed demographic and clinical characteristics",
        "id": "Berikan karakteristik demografis dan klinis yang lebih rinci"
    },

    # -------------------------------------------------------------------------
    # Pitfalls - Intervention
    # -------------------------------------------------------------------------
    "issue_intervention_missing": {
        "en": "No intervention specified",
        "id": "Intervensi belum ditentukan"
    },
    "rec_intervention_missing": {
        "en": "Clearly define the specific intervention or exposure",
        "id": "Definisikan intervensi atau paparan secara spesifik"
    },
    "issue_intervention_vague": {
        "en": "Insufficient intervention details",
        "id": "Detail intervensi kurang memadai"
    },
    "rec_intervention_vague": {
        "en": "Provide more specific details about the intervention protocol",
        "id": "Berikan detail protokol intervensi yang lebih spesifik"
    },

    # -------------------------------------------------------------------------
    # Pitfalls - Comparison
    # -------------------------------------------------------------------------
    "issue_comparison_missing": {
        "en": "No comparison group defined",
        "id": "Kelompok pembanding belum didefinisikan"
    },
    "rec_comparison_missing": {
        "en": "Specify the control or alternative intervention group",
        "id": "Tentukan kelompok kontrol atau intervensi alternatif"
    },

    # -------------------------------------------------------------------------
    # Pitfalls - Outcomes
    # -------------------------------------------------------------------------
    "issue_outcomes_missing": {
        "en": "No outcomes specified",
        "id": "Luaran belum ditentukan"
    },
    "rec_outcomes_missing": {
        "en": "Clearly define primary and secondary outcome measures",
        "id": "Definisikan ukuran luaran primer dan sekunder dengan jelas"
    },
    "issue_outcomes_vague": {
        "en": "Vague outcome description",
        "id": "Deskripsi luaran terlalu umum"
    },
    "rec_outcomes_vague": {
        "en": "Provide measurable and specific outcome criteria",
        "id": "Berikan kriteria luaran yang terukur dan spesifik"
    },

    # -------------------------------------------------------------------------
    # Pitfalls - Timing & Setting
    # -------------------------------------------------------------------------
    "issue_timing_missing": {
        "en": "No study duration specified",
        "id": "Durasi studi belum ditentukan"
    },
    "rec_timing_missing": {
        "en": "Define the specific timeframe for data collection and follow-up",
        "id": "Tentukan kerangka waktu pengumpulan data dan tindak lanjut"
    },
    "issue_setting_missing": {
        "en": "No research setting described",
        "id": "Lokasi penelitian belum dijelaskan"
    },
    "rec_setting_missing": {
        "en": "Specify the context and location of the research",
        "id": "Jelaskan konteks dan lokasi penelitian"
    },

    # -------------------------------------------------------------------------
    # Evidence Quality Bands
    # -------------------------------------------------------------------------
    "band_high": {
        "en": "High Quality Evidence",
        "id": "Bukti Berkualitas Tinggi"
    },
    "band_moderate": {
        "en": "Moderate Quality Evidence",
        "id": "Bukti Berkualitas Sedang"
    },
    "band_low": {
        "en": "Low Quality Evidence",
        "id": "Bukti Berkualitas Rendah"
    },
    "band_very_low": {
        "en": "Very Low Quality Evidence",
        "id": "Bukti Berkualitas Sangat Rendah"
    },
    "band_rec_high": {
        "en": "Strong evidence - suitable for clinical decision-making and policy development",
        "id": "Bukti kuat - layak untuk pengambilan keputusan klinis dan pengembangan kebijakan"
    },
    "band_rec_moderate": {
        "en": "Moderate evidence - can inform decisions but consider limitations",
        "id": "Bukti sedang - dapat mendukung keputusan dengan memperhatikan keterbatasan"
    },
    "band_rec_low": {
        "en": "Low evidence - use with caution, consider as preliminary findings only",
        "id": "Bukti rendah - gunakan dengan hati-hati, anggap sebagai temuan awal"
    },
    "band_rec_very_low": {
        "en": "Very low evidence - insufficient for decision-making, more research needed",
        "id": "Bukti sangat rendah - belum cukup untuk pengambilan keputusan, perlu penelitian lanjutan"
    },

    # -------------------------------------------------------------------------
    # Messages
    # -------------------------------------------------------------------------
    "msg_strength_score": {
        "en": "Framework Strength: {score}/100",
        "id": "Kekuatan Kerangka: {score}/100"
    },
    "msg_evidence_score": {
        "en": "Evidence Quality Score: {score}/100",
        "id": "Skor Kualitas Bukti: {score}/100"
    },
    "msg_completion": {
        "en": "Framework Completion: {percent}%",
        "id": "Kelengkapan Kerangka: {percent}%"
    },
}


def set_language(lang: str) -> None:
    """
    Set the current language.

    Args:
        lang: Language code ('en' or 'id')
    """
    global _current_language
    if lang in SUPPORTED_LANGUAGES:
        _current_language = lang


def get_current_language() -> str:
    """
    Get the current language code.

    Returns:
        Current language code ('en' or 'id')
    """
    return _current_language


def get_text(key: str, lang: Optional[str] = None, **kwargs) -> str:
    """
    Get localized text for a given key.

    Args:
        key: Text key from TEXTS dictionary
        lang: Language code (optional, uses current language if not provided)
        **kwargs: Format arguments for string interpolation

    Returns:
        Localized text string, or the key itself if not found
    """
    language = lang or _current_language

    text_entry = TEXTS.get(key, {})
    text = text_entry.get(language, text_entry.get("en", key))

    # Apply format arguments if provided
    if kwargs:
        try:
            text = text.format(**kwargs)
        except (KeyError, ValueError):
            pass

    return text


def get_all_texts(lang: Optional[str] = None) -> Dict[str, str]:
    """
    Get all texts for a given language.

    Args:
        lang: Language code (optional, uses current language if not provided)

    Returns:
        Dictionary of all texts for the language
    """
    language = lang or _current_language
    return {key: get_text(key, language) for key in TEXTS.keys()}

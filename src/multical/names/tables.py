from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from ..core.types import CalendarType


@dataclass(frozen=True)
class NameTable:
    months: Tuple[str, ...]
    short_months: Tuple[str, ...]
    weekdays: Tuple[str, ...]  # Saturday first
    short_weekdays: Tuple[str, ...]
    eras: Tuple[str, str]  # indexed by ERA: BC, AD
    am_pm: Tuple[str, str]


_WEEKDAYS_EN = ("Saturday", "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday")
_SHORT_WEEKDAYS_EN = ("Sa", "Su", "Mo", "Tu", "We", "Th", "Fr")
_ERAS_EN = ("BC", "AD")
_AM_PM_EN = ("AM", "PM")


CIVIL_EN = NameTable(
    months=(
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    short_months=("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
    weekdays=_WEEKDAYS_EN,
    short_weekdays=_SHORT_WEEKDAYS_EN,
    eras=_ERAS_EN,
    am_pm=_AM_PM_EN,
)

PERSIAN_FA = NameTable(
    months=(
        "فروردین", "اردیبهشت", "خرداد", "تیر", "مرداد", "شهریور",
        "مهر", "آبان", "آذر", "دی", "بهمن", "اسفند",
    ),
    short_months=("فر", "ارد", "خرد", "تیر", "مر", "شهر", "مهر", "آب", "آذر", "دی", "به", "اس"),
    weekdays=("شنبه", "یکشنبه", "دوشنبه", "سه‌شنبه", "چهارشنبه", "پنجشنبه", "جمعه"),
    short_weekdays=("ش", "ی", "د", "س", "چ", "پ", "ج"),
    eras=("قبل از میلاد", "بعد از میلاد"),
    am_pm=("قبل از ظهر", "بعد از ظهر"),
)

PERSIAN_EN = NameTable(
    months=(
        "Farvardin", "Ordibehesht", "Khordad", "Tir", "Mordad", "Shahrivar",
        "Mehr", "Aban", "Azar", "Dey", "Bahman", "Esfand",
    ),
    short_months=("Far", "Ord", "Kho", "Tir", "Mor", "Sha", "Meh", "Aba", "Aza", "Dey", "Bah", "Esf"),
    weekdays=_WEEKDAYS_EN,
    short_weekdays=_SHORT_WEEKDAYS_EN,
    eras=_ERAS_EN,
    am_pm=_AM_PM_EN,
)

HIJRI_AR = NameTable(
    months=(
        "محرم", "صفر", "ربيع الأول", "ربيع الثاني", "جمادى الأولى", "جمادى الآخرة",
        "رجب", "شعبان", "رمضان", "شوال", "ذو القعدة", "ذو الحجة",
    ),
    short_months=("مح", "صف", "رب١", "رب٢", "جم١", "جم٢", "رج", "شع", "رم", "شو", "ذقع", "ذحج"),
    weekdays=("السبت", "الأحد", "الإثنين", "الثلاثاء", "الأربعاء", "الخميس", "الجمعة"),
    short_weekdays=("سب", "أح", "إث", "ثل", "أر", "خم", "جم"),
    eras=("قبل الميلاد", "بعد الميلاد"),
    am_pm=("قبل الظهر", "بعد الظهر"),
)

HIJRI_EN = NameTable(
    months=(
        "Muharram", "Safar", "Rabiʿ al-Awwal", "Rabiʿ ath-Thani", "Jumada al-Ula", "Jumada al-Akhirah",
        "Rajab", "Sha'ban", "Ramadan", "Shawwal", "Dhu al-Qa'dah", "Dhu al-Hijjah",
    ),
    short_months=("Muh", "Saf", "Ra1", "Ra2", "Ja1", "Ja2", "Raj", "Shb", "Ram", "Shw", "DQa", "DHj"),
    weekdays=_WEEKDAYS_EN,
    short_weekdays=_SHORT_WEEKDAYS_EN,
    eras=_ERAS_EN,
    am_pm=_AM_PM_EN,
)

JAPANESE_JA = NameTable(
    months=(
        "いち がつ", "に がつ", "さん がつ", "し がつ", "ご がつ", "ろく がつ",
        "しち がつ", "はち がつ", "く がつ", "じゅう がつ", "じゅういち がつ", "じゅうに がつ",
    ),
    short_months=("一月", "二月", "三月", "四月", "五月", "六月", "七月", "八月", "九月", "十月", "十一月", "十二月"),
    weekdays=("ど ようび", "にち ようび", "げつ ようび", "か ようび", "すい ようび", "もく ようび", "きん ようび"),
    short_weekdays=("ど", "にち", "げつ", "か", "すい", "もく", "きん"),
    eras=("きげんぜん", "せいれき"),
    am_pm=("ごぜん", "ごご"),
)

JAPANESE_EN = NameTable(
    months=(
        "Ichigatsu", "Nigatsu", "Sangatsu", "Shigatsu", "Gogatsu", "Rokugatsu",
        "Shichigatsu", "Hachigatsu", "Kugatsu", "Jūgatsu", "Jūichigatsu", "Jūnigatsu",
    ),
    short_months=("Ichi", "Ni", "San", "Shi", "Go", "Roku", "Shichi", "Hachi", "Ku", "Jū", "Jūichi", "Jūni"),
    weekdays=_WEEKDAYS_EN,
    short_weekdays=_SHORT_WEEKDAYS_EN,
    eras=_ERAS_EN,
    am_pm=_AM_PM_EN,
)

# (native table, table for every other language)
ALL_TABLES: Dict[CalendarType, Tuple[NameTable, NameTable]] = {
    CalendarType.CIVIL: (CIVIL_EN, CIVIL_EN),
    CalendarType.PERSIAN: (PERSIAN_FA, PERSIAN_EN),
    CalendarType.HIJRI: (HIJRI_AR, HIJRI_EN),
    CalendarType.JAPANESE: (JAPANESE_JA, JAPANESE_EN),
}

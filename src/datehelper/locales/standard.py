from __future__ import annotations

from .registry import LocalizationTable, RelativePhrases, register_locale

def _plural(n: int, unit: str) -> str:
    return f"{n} {unit}{'s' if n > 1 else ''} ago"

EN = LocalizationTable(
    language="en",
    weekdays=("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"),
    weekdays_abbr=("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
    months=(
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    months_abbr=("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
    relative=RelativePhrases(
        just_now="Just now",
        minute=lambda n: _plural(n, "minute"),
        hour=lambda n: _plural(n, "hour"),
        day=lambda n: _plural(n, "day"),
    ),
)

# Thai phrases do not inflect for count.
TH = LocalizationTable(
    language="th",
    weekdays=("อาทิตย์", "จันทร์", "อังคาร", "พุธ", "พฤหัสบดี", "ศุกร์", "เสาร์"),
    weekdays_abbr=("อา", "จ", "อ", "พ", "พฤ", "ศ", "ส"),
    months=(
        "มกราคม", "กุมภาพันธ์", "มีนาคม", "เมษายน", "พฤษภาคม", "มิถุนายน",
        "กรกฎาคม", "สิงหาคม", "กันยายน", "ตุลาคม", "พฤศจิกายน", "ธันวาคม",
    ),
    months_abbr=(
        "ม.ค.", "ก.พ.", "มี.ค.", "เม.ย.", "พ.ค.", "มิ.ย.",
        "ก.ค.", "ส.ค.", "ก.ย.", "ต.ค.", "พ.ย.", "ธ.ค.",
    ),
    relative=RelativePhrases(
        just_now="เมื่อสักครู่",
        minute=lambda n: f"{n} นาทีที่แล้ว",
        hour=lambda n: f"{n} ชั่วโมงที่แล้ว",
        day=lambda n: f"{n} วันที่ผ่านมา",
    ),
)

register_locale(EN)
register_locale(TH)

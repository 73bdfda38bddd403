"""
Language metadata and detection keywords.
"""

from typing import Dict, List

LANGUAGE_METADATA: Dict[str, Dict[str, object]] = {
    # Tier 1
    "en": {"name": "English", "native_name": "English", "region": "Global", "priority": 1},
    "zh": {"name": "Chinese (Simplified)", "native_name": "中文 (简体)", "region": "China, Singapore", "priority": 1},
    "es": {"name": "Spanish", "native_name": "Español", "region": "Latin America, Spain, US", "priority": 1},
    # Tier 2
    "pt": {"name": "Portuguese", "native_name": "Português", "region": "Brazil, Portugal, Africa", "priority": 2},
    "ja": {"name": "Japanese", "native_name": "日本語", "region": "Japan", "priority": 2},
    "ko": {"name": "Korean", "native_name": "한국어", "region": "South Korea", "priority": 2},
    "de": {"name": "German", "native_name": "Deutsch", "region": "Germany, Austria, Switzerland", "priority": 2},
    "ru": {"name": "Russian", "native_name": "Русский", "region": "Russia, Eastern Europe", "priority": 2},
    "hi": {"name": "Hindi", "native_name": "हिन्दी", "region": "India", "priority": 2},
    "ar": {"name": "Arabic", "native_name": "العربية", "region": "Middle East, North Africa", "priority": 2},
    # Tier 3
    "tr": {"name": "Turkish", "native_name": "Türkçe", "region": "Turkey", "priority": 3},
    "vi": {"name": "Vietnamese", "native_name": "Tiếng Việt", "region": "Vietnam", "priority": 3},
    "th": {"name": "Thai", "native_name": "ไทย", "region": "Thailand", "priority": 3},
    "id": {"name": "Indonesian", "native_name": "Bahasa Indonesia", "region": "Indonesia, Malaysia", "priority": 3},
    "pl": {"name": "Polish", "native_name": "Polski", "region": "Poland", "priority": 3},
    "uk": {"name": "Ukrainian", "native_name": "Українська", "region": "Ukraine", "priority": 3},
    "he": {"name": "Hebrew", "native_name": "עברית", "region": "Israel", "priority": 3},
    "fr": {"name": "French", "native_name": "Français", "region": "France, Canada, Africa", "priority": 3},
    "it": {"name": "Italian", "native_name": "Italiano", "region": "Italy, Switzerland", "priority": 3},
    "nl": {"name": "Dutch", "native_name": "Nederlands", "region": "Netherlands, Belgium", "priority": 3},
}

# Lower-case keywords; a message containing any of them suggests the language
LANGUAGE_KEYWORDS: Dict[str, List[str]] = {
    "es": ["falló", "ocurrió", "ocurrido", "por favor", "verifica", "conexión", "billetera", "error de red"],
    "pt": ["falhou", "ocorreu", "ocorrido", "por favor", "verificar", "conexão", "carteira", "erro de rede"],
    "fr": ["erreur", "échec", "survenue", "veuillez", "vérifier", "connexion", "portefeuille"],
    "de": ["fehler", "aufgetreten", "bitte", "überprüfen", "verbindung", "brieftasche"],
    "it": ["errore", "fallito", "si è verificato", "per favore", "controlla", "connessione", "portafoglio"],
    "nl": ["fout", "mislukt", "opgetreden", "alstublieft", "controleren", "verbinding", "portemonnee"],
    "zh": ["错误", "失败", "发生", "请", "检查", "连接", "钱包"],
    "ja": ["エラー", "失敗", "発生", "ください", "確認", "接続", "ウォレット"],
    "ko": ["오류", "실패", "발생", "해주세요", "확인", "연결", "지갑"],
    "ru": ["ошибка", "неудача", "произошла", "пожалуйста", "проверить", "соединение", "кошелек"],
    "uk": ["помилка", "невдача", "сталася", "будь ласка", "перевірте", "з'єднання", "гаманець"],
    "ar": ["خطأ", "فشل", "حدث", "يرجى", "تحقق", "اتصال", "محفظة"],
    "he": ["שגיאה", "כישלון", "אירעה", "אנא", "בדוק", "חיבור", "ארנק"],
    "hi": ["त्रुटि", "असफल", "हुई", "कृपया", "जांचें", "कनेक्शन", "वॉलेट"],
    "tr": ["hata", "başarısız", "oluştu", "lütfen", "kontrol", "bağlantı", "cüzdan"],
    "vi": ["lỗi", "thất bại", "xảy ra", "vui lòng", "kiểm tra", "kết nối"],
    "th": ["ข้อผิดพลาด", "ล้มเหลว", "เกิดขึ้น", "กรุณา", "ตรวจสอบ", "การเชื่อมต่อ", "กระเป๋าเงิน"],
    "id": ["kesalahan", "gagal", "terjadi", "silakan", "periksa", "koneksi", "dompet"],
    "pl": ["błąd", "niepowodzenie", "wystąpił", "proszę", "sprawdź", "połączenie", "portfel"],
}

REGIONAL_FALLBACKS: Dict[str, str] = {
    "china": "zh",
    "americas": "es",
    "europe": "fr",
    "africa": "fr",
    "asia": "ja",
    "oceania": "en",
    "global": "en",
}

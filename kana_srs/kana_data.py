"""
Kana catalog data.

Rows are (id, hiragana, katakana, romaji, type, row). Ids are stable and
are the foreign keys learning items point at, so never rename one.
"""

from __future__ import annotations

from typing import Final

KANA_ROWS: Final[list[tuple[str, str, str, str, str, str]]] = [
    ("a", "あ", "ア", "a", "seion", "a"),
    ("i", "い", "イ", "i", "seion", "a"),
    ("u", "う", "ウ", "u", "seion", "a"),
    ("e", "え", "エ", "e", "seion", "a"),
    ("o", "お", "オ", "o", "seion", "a"),
    ("ka", "か", "カ", "ka", "seion", "ka"),
    ("ki", "き", "キ", "ki", "seion", "ka"),
    ("ku", "く", "ク", "ku", "seion", "ka"),
    ("ke", "け", "ケ", "ke", "seion", "ka"),
    ("ko", "こ", "コ", "ko", "seion", "ka"),
    ("sa", "さ", "サ", "sa", "seion", "sa"),
    ("shi", "し", "シ", "shi", "seion", "sa"),
    ("su", "す", "ス", "su", "seion", "sa"),
    ("se", "せ", "セ", "se", "seion", "sa"),
    ("so", "そ", "ソ", "so", "seion", "sa"),
    ("ta", "た", "タ", "ta", "seion", "ta"),
    ("chi", "ち", "チ", "chi", "seion", "ta"),
    ("tsu", "つ", "ツ", "tsu", "seion", "ta"),
    ("te", "て", "テ", "te", "seion", "ta"),
    ("to", "と", "ト", "to", "seion", "ta"),
    ("na", "な", "ナ", "na", "seion", "na"),
    ("ni", "に", "ニ", "ni", "seion", "na"),
    ("nu", "ぬ", "ヌ", "nu", "seion", "na"),
    ("ne", "ね", "ネ", "ne", "seion", "na"),
    ("no", "の", "ノ", "no", "seion", "na"),
    ("ha", "は", "ハ", "ha", "seion", "ha"),
    ("hi", "ひ", "ヒ", "hi", "seion", "ha"),
    ("fu", "ふ", "フ", "fu", "seion", "ha"),
    ("he", "へ", "ヘ", "he", "seion", "ha"),
    ("ho", "ほ", "ホ", "ho", "seion", "ha"),
    ("ma", "ま", "マ", "ma", "seion", "ma"),
    ("mi", "み", "ミ", "mi", "seion", "ma"),
    ("mu", "む", "ム", "mu", "seion", "ma"),
    ("me", "め", "メ", "me", "seion", "ma"),
    ("mo", "も", "モ", "mo", "seion", "ma"),
    ("ya", "や", "ヤ", "ya", "seion", "ya"),
    ("yu", "ゆ", "ユ", "yu", "seion", "ya"),
    ("yo", "よ", "ヨ", "yo", "seion", "ya"),
    ("ra", "ら", "ラ", "ra", "seion", "ra"),
    ("ri", "り", "リ", "ri", "seion", "ra"),
    ("ru", "る", "ル", "ru", "seion", "ra"),
    ("re", "れ", "レ", "re", "seion", "ra"),
    ("ro", "ろ", "ロ", "ro", "seion", "ra"),
    ("wa", "わ", "ワ", "wa", "seion", "wa"),
    ("wo", "を", "ヲ", "wo", "seion", "wa"),
    ("n", "ん", "ン", "n", "seion", "wa"),
    ("ga", "が", "ガ", "ga", "dakuon", "ga"),
    ("gi", "ぎ", "ギ", "gi", "dakuon", "ga"),
    ("gu", "ぐ", "グ", "gu", "dakuon", "ga"),
    ("ge", "げ", "ゲ", "ge", "dakuon", "ga"),
    ("go", "ご", "ゴ", "go", "dakuon", "ga"),
    ("za", "ざ", "ザ", "za", "dakuon", "za"),
    ("ji", "じ", "ジ", "ji", "dakuon", "za"),
    ("zu", "ず", "ズ", "zu", "dakuon", "za"),
    ("ze", "ぜ", "ゼ", "ze", "dakuon", "za"),
    ("zo", "ぞ", "ゾ", "zo", "dakuon", "za"),
    ("da", "だ", "ダ", "da", "dakuon", "da"),
    ("dji", "ぢ", "ヂ", "dji", "dakuon", "da"),
    ("dzu", "づ", "ヅ", "dzu", "dakuon", "da"),
    ("de", "で", "デ", "de", "dakuon", "da"),
    ("do", "ど", "ド", "do", "dakuon", "da"),
    ("ba", "ば", "バ", "ba", "dakuon", "ba"),
    ("bi", "び", "ビ", "bi", "dakuon", "ba"),
    ("bu", "ぶ", "ブ", "bu", "dakuon", "ba"),
    ("be", "べ", "ベ", "be", "dakuon", "ba"),
    ("bo", "ぼ", "ボ", "bo", "dakuon", "ba"),
    ("pa", "ぱ", "パ", "pa", "handakuon", "pa"),
    ("pi", "ぴ", "ピ", "pi", "handakuon", "pa"),
    ("pu", "ぷ", "プ", "pu", "handakuon", "pa"),
    ("pe", "ぺ", "ペ", "pe", "handakuon", "pa"),
    ("po", "ぽ", "ポ", "po", "handakuon", "pa"),
    ("kya", "きゃ", "キャ", "kya", "yoon", "kya"),
    ("kyu", "きゅ", "キュ", "kyu", "yoon", "kya"),
    ("kyo", "きょ", "キョ", "kyo", "yoon", "kya"),
    ("sha", "しゃ", "シャ", "sha", "yoon", "sha"),
    ("shu", "しゅ", "シュ", "shu", "yoon", "sha"),
    ("sho", "しょ", "ショ", "sho", "yoon", "sha"),
    ("cha", "ちゃ", "チャ", "cha", "yoon", "cha"),
    ("chu", "ちゅ", "チュ", "chu", "yoon", "cha"),
    ("cho", "ちょ", "チョ", "cho", "yoon", "cha"),
    ("nya", "にゃ", "ニャ", "nya", "yoon", "nya"),
    ("nyu", "にゅ", "ニュ", "nyu", "yoon", "nya"),
    ("nyo", "にょ", "ニョ", "nyo", "yoon", "nya"),
    ("hya", "ひゃ", "ヒャ", "hya", "yoon", "hya"),
    ("hyu", "ひゅ", "ヒュ", "hyu", "yoon", "hya"),
    ("hyo", "ひょ", "ヒョ", "hyo", "yoon", "hya"),
    ("mya", "みゃ", "ミャ", "mya", "yoon", "mya"),
    ("myu", "みゅ", "ミュ", "myu", "yoon", "mya"),
    ("myo", "みょ", "ミョ", "myo", "yoon", "mya"),
    ("rya", "りゃ", "リャ", "rya", "yoon", "rya"),
    ("ryu", "りゅ", "リュ", "ryu", "yoon", "rya"),
    ("ryo", "りょ", "リョ", "ryo", "yoon", "rya"),
    ("gya", "ぎゃ", "ギャ", "gya", "yoon", "gya"),
    ("gyu", "ぎゅ", "ギュ", "gyu", "yoon", "gya"),
    ("gyo", "ぎょ", "ギョ", "gyo", "yoon", "gya"),
    ("ja", "じゃ", "ジャ", "ja", "yoon", "ja"),
    ("ju", "じゅ", "ジュ", "ju", "yoon", "ja"),
    ("jo", "じょ", "ジョ", "jo", "yoon", "ja"),
    ("bya", "びゃ", "ビャ", "bya", "yoon", "bya"),
    ("byu", "びゅ", "ビュ", "byu", "yoon", "bya"),
    ("byo", "びょ", "ビョ", "byo", "yoon", "bya"),
    ("pya", "ぴゃ", "ピャ", "pya", "yoon", "pya"),
    ("pyu", "ぴゅ", "ピュ", "pyu", "yoon", "pya"),
    ("pyo", "ぴょ", "ピョ", "pyo", "yoon", "pya"),
]

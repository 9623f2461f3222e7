"""Registry of character sets a soft font can be designated as.

Each entry pairs a Dscs identifier and set size with the characters the
set normally maps to, which is what the editor shows as the "current
character" for a glyph index. ``␦`` marks positions with no character.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Charset:
    """A designatable character set.

    Attributes:
        name: Display name
        id: Dscs identifier (intermediates followed by a final byte)
        size: 94 or 96
        glyphs: Characters at each position, starting at 0x21 (94) or 0x20 (96)
    """

    name: str
    id: str
    size: int
    glyphs: str


ALL_CHARSETS: tuple[Charset, ...] = (
    Charset("Unregistered/94", " @", 94, ""),
    Charset("Unregistered/96", " @", 96, ""),
    Charset("ASCII", "B", 94, "!\"#$%&'()*+,-./0123456789:;<=>?@ABCDEFGHIJKLMNOPQRSTUVWXYZ[\\]^_`abcdefghijklmnopqrstuvwxyz{|}~"),
    Charset("Latin-1 (ISO)", "A", 96, " ¡¢£¤¥¦§¨©ª«¬­®¯°±²³´µ¶·¸¹º»¼½¾¿ÀÁÂÃÄÅÆÇÈÉÊËÌÍÎÏÐÑÒÓÔÕÖ×ØÙÚÛÜÝÞßàáâãäåæçèéêëìíîïðñòóôõö÷øùúûüýþÿ"),
    Charset("Latin-2 (ISO)", "B", 96, " Ą˘Ł¤ĽŚ§¨ŠŞŤŹ­ŽŻ°ą˛ł´ľśˇ¸šşťź˝žżŔÁÂĂÄĹĆÇČÉĘËĚÍÎĎĐŃŇÓÔŐÖ×ŘŮÚŰÜÝŢßŕáâăäĺćçčéęëěíîďđńňóôőö÷řůúűüýţ˙"),
    Charset("Greek (ISO)", "F", 96, " ‘’£␦␦¦§¨©␦«¬­␦―°±²³΄΅Ά·ΈΉΊ»Ό½ΎΏΐΑΒΓΔΕΖΗΘΙΚΛΜΝΞΟΠΡ␦ΣΤΥΦΧΨΩΪΫάέήίΰαβγδεζηθικλμνξοπρςστυφχψωϊϋόύώ␦"),
    Charset("Hebrew (ISO)", "H", 96, " ␦¢£¤¥¦§¨©×«¬­®¯°±²³´µ¶·¸¹÷»¼½¾␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦‗אבגדהוזחטיךכלםמןנסעףפץצקרשת␦␦‎‏␦"),
    Charset("Latin-Cyrillic (ISO)", "L", 96, " ЁЂЃЄЅІЇЈЉЊЋЌ­ЎЏАБВГДЕЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯабвгдежзийклмнопрстуфхцчшщъыьэюя№ёђѓєѕіїјљњћќ§ўџ"),
    Charset("Latin-5 (ISO)", "M", 96, " ¡¢£¤¥¦§¨©ª«¬­®¯°±²³´µ¶·¸¹º»¼½¾¿ÀÁÂÃÄÅÆÇÈÉÊËÌÍÎÏĞÑÒÓÔÕÖ×ØÙÚÛÜİŞßàáâãäåæçèéêëìíîïğñòóôõö÷øùúûüışÿ"),
    Charset("Supplemental (DEC)", "%5", 94, "¡¢£␦¥␦§¤©ª«␦␦␦␦°±²³␦µ¶·␦¹º»¼½␦¿ÀÁÂÃÄÅÆÇÈÉÊËÌÍÎÏ␦ÑÒÓÔÕÖŒØÙÚÛÜŸ␦ßàáâãäåæçèéêëìíîï␦ñòóôõöœøùúûüÿ␦"),
    Charset("Greek (DEC)", "\"?", 94, "¡¢£␦¥␦§¤©ª«␦␦␦␦°±²³␦µ¶·␦¹º»¼½␦¿ϊΑΒΓΔΕΖΗΘΙΚΛΜΝΞΟ␦ΠΡΣΤΥΦΧΨΩάέήί␦όϋαβγδεζηθικλμνξο␦πρστυφχψωςύώ΄␦"),
    Charset("Hebrew (DEC)", "\"4", 94, "¡¢£␦¥␦§¤©ª«␦␦␦␦°±²³␦µ¶·␦¹º»¼½␦¿␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦אבגדהוזחטיךכלםמןנסעףפץצקרשת␦␦␦␦"),
    Charset("Turkish (DEC)", "%0", 94, "¡¢£␦¥␦§¤©ª«␦␦İ␦°±²³␦µ¶·␦¹º»¼½ı¿ÀÁÂÃÄÅÆÇÈÉÊËÌÍÎÏĞÑÒÓÔÕÖŒØÙÚÛÜŸŞßàáâãäåæçèéêëìíîïğñòóôõöœøùúûüÿş"),
    Charset("Cyrillic (DEC)", "&4", 94, "␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦␦юабцдефгхийклмнопярстужвьызшэщчъЮАБЦДЕФГХИЙКЛМНОПЯРСТУЖВЬЫЗШЭЩЧ"),
    Charset("Special Graphics (DEC)", "0", 94, "!\"#$%&'()*+,-./0123456789:;<=>?@ABCDEFGHIJKLMNOPQRSTUVWXYZ[\\]^ ♦▒␉␌␍␊°±␤␋┘┐┌└┼⎺⎻─⎼⎽├┤┴┬│≤≥π≠£·"),
    Charset("Technical (DEC)", ">", 94, "⎷┌─⌠⌡│⎡⎣⎤⎦⎛⎝⎞⎠⎨⎬␦␦╲╱␦␦␦␦␦␦␦≤≠≥∫∴∝∞÷Δ∇ΦΓ∼≃Θ×Λ⇔⇒≡ΠΨ␦Σ␦␦√ΩΞΥ⊂⊃∩∪∧∨¬αβχδεφγηιθκλ␦ν∂πψρστ␦ƒωξυζ←↑→↓"),
    Charset("U.K. (NRCS)", "A", 94, "!\"£$%&'()*+,-./0123456789:;<=>?@ABCDEFGHIJKLMNOPQRSTUVWXYZ[\\]^_`abcdefghijklmnopqrstuvwxyz{|}~"),
    Charset("French (NRCS)", "R", 94, "!\"£$%&'()*+,-./0123456789:;<=>?àABCDEFGHIJKLMNOPQRSTUVWXYZ°ç§^_`abcdefghijklmnopqrstuvwxyzéùè¨"),
    Charset("French Canadian (NRCS)", "9", 94, "!\"#$%&'()*+,-./0123456789:;<=>?àABCDEFGHIJKLMNOPQRSTUVWXYZâçêî_ôabcdefghijklmnopqrstuvwxyzéùèû"),
    Charset("Norwegian/Danish (NRCS)", "`", 94, "!\"#$%&'()*+,-./0123456789:;<=>?@ABCDEFGHIJKLMNOPQRSTUVWXYZÆØÅ^_`abcdefghijklmnopqrstuvwxyzæøå~"),
    Charset("Finnish (NRCS)", "5", 94, "!\"#$%&'()*+,-./0123456789:;<=>?@ABCDEFGHIJKLMNOPQRSTUVWXYZÄÖÅÜ_éabcdefghijklmnopqrstuvwxyzäöåü"),
    Charset("German (NRCS)", "K", 94, "!\"#$%&'()*+,-./0123456789:;<=>?§ABCDEFGHIJKLMNOPQRSTUVWXYZÄÖÜ^_`abcdefghijklmnopqrstuvwxyzäöüß"),
    Charset("Italian (NRCS)", "Y", 94, "!\"£$%&'()*+,-./0123456789:;<=>?§ABCDEFGHIJKLMNOPQRSTUVWXYZ°çé^_ùabcdefghijklmnopqrstuvwxyzàòèì"),
    Charset("Swiss (NRCS)", "=", 94, "!\"ù$%&'()*+,-./0123456789:;<=>?àABCDEFGHIJKLMNOPQRSTUVWXYZéçêîèôabcdefghijklmnopqrstuvwxyzäöüû"),
    Charset("Swedish (NRCS)", "7", 94, "!\"#$%&'()*+,-./0123456789:;<=>?ÉABCDEFGHIJKLMNOPQRSTUVWXYZÄÖÅÜ_éabcdefghijklmnopqrstuvwxyzäöåü"),
    Charset("Spanish (NRCS)", "Z", 94, "!\"£$%&'()*+,-./0123456789:;<=>?§ABCDEFGHIJKLMNOPQRSTUVWXYZ¡Ñ¿^_`abcdefghijklmnopqrstuvwxyz°ñç~"),
    Charset("Portuguese (NRCS)", "%6", 94, "!\"#$%&'()*+,-./0123456789:;<=>?@ABCDEFGHIJKLMNOPQRSTUVWXYZÃÇÕ^_`abcdefghijklmnopqrstuvwxyzãçõ~"),
    Charset("Greek (NRCS)", "\">", 94, "!\"#$%&'()*+,-./0123456789:;<=>?ϊΑΒΓΔΕΖΗΘΙΚΛΜΝΞΟ␦ΠΡΣΤΥΦΧΨΩάέήί␦όϋαβγδεζηθικλμνξο␦πρστυφχψωςύώ΄␦"),
    Charset("Hebrew (NRCS)", "%=", 94, "!\"#$%&'()*+,-./0123456789:;<=>?@ABCDEFGHIJKLMNOPQRSTUVWXYZ[\\]^_אבגדהוזחטיךכלםמןנסעףפץצקרשת{|}~"),
    Charset("Turkish (NRCS)", "%2", 94, "ı\"#$%ğ'()*+,-./0123456789:;<=>?İABCDEFGHIJKLMNOPQRSTUVWXYZŞÖÇÜ_Ğabcdefghijklmnopqrstuvwxyzşöçü"),
    Charset("Russian (NRCS)", "&5", 94, "!\"#$%&'()*+,-./0123456789:;<=>?@ABCDEFGHIJKLMNOPQRSTUVWXYZ[\\]^_ЮАБЦДЕФГХИЙКЛМНОПЯРСТУЖВЬЫЗШЭЩЧ"),
)

ASCII = ALL_CHARSETS[2]


def names(size: int | None = None) -> list[str]:
    """List charset names, optionally only those of one size."""
    return [cs.name for cs in ALL_CHARSETS if size is None or cs.size == size]


def index_of(charset_id: str, size: int) -> int | None:
    """Position of a charset among the charsets of the same size.

    Args:
        charset_id: Dscs identifier
        size: 94 or 96

    Returns:
        Index into ``names(size)``, or None if the id is not registered
    """
    candidates = [cs for cs in ALL_CHARSETS if cs.size == size]
    for index, cs in enumerate(candidates):
        if cs.id == charset_id:
            return index
    return None


def from_index(index: int, size: int | None = None) -> Charset | None:
    """Look up a charset by its position in ``names(size)``."""
    candidates = [cs for cs in ALL_CHARSETS if size is None or cs.size == size]
    if 0 <= index < len(candidates):
        return candidates[index]
    return None


def find(charset_id: str, size: int) -> Charset | None:
    """Find the first charset with a repertoire matching an id and size."""
    for cs in ALL_CHARSETS:
        if cs.size == size and cs.id == charset_id and cs.glyphs:
            return cs
    return None


def find_by_name(name: str) -> Charset | None:
    """Find a charset by display name, ignoring case."""
    for cs in ALL_CHARSETS:
        if cs.name.lower() == name.lower():
            return cs
    return None

"""
EIA-608 code tables used by the Scenarist SCC file handler.

Keys are lower-case hex strings as they appear in an SCC file (with parity bits set).
Characters are looked up by byte (2 hex digits); special and extended characters
and control commands occupy a full 4 hex digit code.
"""
from types import MappingProxyType

BREAK = 'break'
ITALIC_ON = 'italic'
ITALIC_OFF = 'end-italic'

NO_SYMBOL = '#'
PADDING = '80'

HEADER = 'Scenarist_SCC V1.0'

RESUME_CAPTION_LOADING = '9420'
ERASE_DISPLAYED_MEMORY = '942c'
ERASE_NON_DISPLAYED_MEMORY = '94ae'
END_OF_CAPTION = '942f'
MIDROW_ITALICS = '91ae'
MIDROW_WHITE = '9120'

# Preamble address codes for the four rows at the bottom of the screen, top to bottom
BOTTOM_ROW_CODES = ('13d0', '1370', '94d0', '9470')

_NOP = ()
_BR = (BREAK,)
_BR_IT = (BREAK, ITALIC_ON)
_IT = (ITALIC_ON,)
_END_IT = (ITALIC_OFF,)

_COMMANDS = {
    '9420': _NOP, '9429': _NOP, '9425': _NOP, '9426': _NOP, '94a7': _NOP, '942a': _NOP,
    '94ab': _NOP, '942c': _NOP, '94ae': _NOP, '942f': _NOP, '9779': _BR, '9775': _BR,
    '9776': _BR, '9770': _BR, '9773': _BR, '10c8': _BR, '10c2': _BR, '166e': _BR_IT,
    '166d': _BR, '166b': _BR, '10c4': _BR, '9473': _BR, '977f': _BR, '977a': _BR,
    '1668': _BR, '1667': _BR, '1664': _BR, '1661': _BR, '10ce': _BR_IT, '94c8': _BR,
    '94c7': _BR, '94c4': _BR, '94c2': _BR, '94c1': _BR, '915e': _BR, '915d': _BR,
    '915b': _BR, '925d': _BR, '925e': _BR, '925b': _BR, '97e6': _BR, '97e5': _BR,
    '97e3': _BR, '97e0': _BR, '97e9': _BR, '9154': _BR, '9157': _BR, '9151': _BR,
    '9258': _BR, '9152': _BR, '9257': _BR, '9254': _BR, '9252': _BR, '9158': _BR,
    '9251': _BR, '94cd': _BR, '94ce': _BR_IT, '94cb': _BR, '97ef': _BR_IT, '1373': _BR,
    '97ec': _BR, '97ea': _BR, '15c7': _BR, '974f': _BR_IT, '10c1': _BR, '974a': _BR,
    '974c': _BR, '10c7': _BR, '976d': _BR, '15d6': _BR, '15d5': _BR, '15d3': _BR,
    '15d0': _BR, '15d9': _BR, '9745': _BR, '9746': _BR, '9740': _BR, '9743': _BR,
    '9749': _BR, '15df': _BR, '15dc': _BR, '15da': _BR, '15f8': _BR, '94fe': _BR,
    '94fd': _BR, '94fc': _BR, '94fb': _BR, '944f': _BR_IT, '944c': _BR, '944a': _BR,
    '92fc': _BR, '1051': _BR, '1052': _BR, '1054': _BR, '92fe': _BR, '92fd': _BR,
    '1058': _BR, '157a': _BR, '157f': _BR, '9279': _BR, '94f4': _BR, '94f7': _BR,
    '94f1': _BR, '9449': _BR, '92fb': _BR, '9446': _BR, '9445': _BR, '9443': _BR,
    '94f8': _BR, '9440': _BR, '1057': _BR, '9245': _BR, '92f2': _BR, '1579': _BR,
    '92f7': _BR, '105e': _BR, '92f4': _BR, '1573': _BR, '1570': _BR, '1576': _BR,
    '1575': _BR, '16c1': _BR, '16c2': _BR, '9168': _BR, '16c7': _BR, '9164': _BR,
    '9167': _BR, '9161': _BR, '9162': _BR, '947f': _BR, '91c2': _BR, '91c1': _BR,
    '91c7': _BR, '91c4': _BR, '13e3': _BR, '91c8': _BR, '91d0': _BR, '13e5': _BR,
    '13c8': _BR, '16cb': _BR, '16cd': _BR, '16ce': _BR_IT, '916d': _BR, '916e': _BR_IT,
    '916b': _BR, '91d5': _BR, '137a': _BR, '91cb': _BR, '91ce': _BR_IT, '91cd': _BR,
    '13ec': _BR, '13c1': _BR, '13ea': _BR, '13ef': _BR_IT, '94f2': _BR, '97fb': _BR,
    '97fc': _BR, '1658': _BR, '97fd': _BR, '97fe': _BR, '1652': _BR, '1651': _BR,
    '1657': _BR, '1654': _BR, '10cb': _BR, '97f2': _BR, '97f1': _BR, '97f7': _BR,
    '97f4': _BR, '165b': _BR, '97f8': _BR, '165d': _BR, '165e': _BR, '15cd': _BR,
    '10cd': _BR, '9767': _BR, '9249': _BR, '1349': _BR, '91d9': _BR, '1340': _BR,
    '91d3': _BR, '9243': _BR, '1343': _BR, '91d6': _BR, '1345': _BR, '1346': _BR,
    '9246': _BR, '94e9': _BR, '94e5': _BR, '94e6': _BR, '94e0': _BR, '94e3': _BR,
    '15ea': _BR, '15ec': _BR, '15ef': _BR_IT, '16fe': _BR, '16fd': _BR, '16fc': _BR,
    '16fb': _BR, '1367': _BR, '94ef': _BR_IT, '94ea': _BR, '94ec': _BR, '924a': _BR,
    '91dc': _BR, '924c': _BR, '91da': _BR, '91df': _BR, '134f': _BR_IT, '924f': _BR_IT,
    '16f8': _BR, '16f7': _BR, '16f4': _BR, '16f2': _BR, '16f1': _BR, '15e0': _BR,
    '15e3': _BR, '15e5': _BR, '15e6': _BR, '15e9': _BR, '9757': _BR, '9754': _BR,
    '9752': _BR, '9751': _BR, '9758': _BR, '92f1': _BR, '104c': _BR, '104a': _BR,
    '104f': _BR_IT, '105d': _BR, '92f8': _BR, '975e': _BR, '975d': _BR, '975b': _BR,
    '1043': _BR, '1040': _BR, '1046': _BR, '1045': _BR, '1049': _BR, '9479': _BR,
    '917f': _BR, '9470': _BR, '9476': _BR, '917a': _BR, '9475': _BR, '927a': _BR,
    '927f': _BR, '134a': _BR, '15fb': _BR, '15fc': _BR, '15fd': _BR, '15fe': _BR,
    '1546': _BR, '1545': _BR, '1543': _BR, '1540': _BR, '1549': _BR, '13fd': _BR,
    '13fe': _BR, '13fb': _BR, '13fc': _BR, '92e9': _BR, '92e6': _BR, '9458': _BR,
    '92e5': _BR, '92e3': _BR, '92e0': _BR, '9270': _BR, '9273': _BR, '9275': _BR,
    '9276': _BR, '15f1': _BR, '15f2': _BR, '15f4': _BR, '15f7': _BR, '9179': _BR,
    '9176': _BR, '9175': _BR, '947a': _BR, '9173': _BR, '9170': _BR, '13f7': _BR,
    '13f4': _BR, '13f2': _BR, '13f1': _BR, '92ef': _BR_IT, '92ec': _BR, '13f8': _BR,
    '92ea': _BR, '154f': _BR_IT, '154c': _BR, '154a': _BR, '16c4': _BR, '16c8': _BR,
    '97c8': _BR, '164f': _BR_IT, '164a': _BR, '164c': _BR, '1645': _BR, '1646': _BR,
    '1640': _BR, '1643': _BR, '1649': _BR, '94df': _BR, '94dc': _BR, '94da': _BR,
    '135b': _BR, '135e': _BR, '135d': _BR, '1370': _BR, '9240': _BR, '13e9': _BR,
    '1375': _BR, '1679': _BR, '1358': _BR, '1352': _BR, '1351': _BR, '1376': _BR,
    '1357': _BR, '1354': _BR, '1379': _BR, '94d9': _BR, '94d6': _BR, '94d5': _BR,
    '1562': _BR, '94d3': _BR, '94d0': _BR, '13e0': _BR, '13e6': _BR, '976b': _BR,
    '15c4': _BR, '15c2': _BR, '15c1': _BR, '976e': _BR_IT, '134c': _BR, '15c8': _BR,
    '92c8': _BR, '16e9': _BR, '16e3': _BR, '16e0': _BR, '16e6': _BR, '16e5': _BR,
    '91e5': _BR, '91e6': _BR, '91e0': _BR, '91e3': _BR, '13c4': _BR, '13c7': _BR,
    '91e9': _BR, '13c2': _BR, '9762': _BR, '15ce': _BR_IT, '9761': _BR, '15cb': _BR,
    '9764': _BR, '9768': _BR, '91ef': _BR_IT, '91ea': _BR, '91ec': _BR, '13ce': _BR_IT,
    '13cd': _BR, '97da': _BR, '13cb': _BR, '1362': _BR, '16ec': _BR, '16ea': _BR,
    '16ef': _BR_IT, '97c1': _BR, '97c2': _BR, '97c4': _BR, '97c7': _BR, '92cd': _BR,
    '92ce': _BR_IT, '92cb': _BR, '92da': _BR, '92dc': _BR, '92df': _BR, '97df': _BR,
    '155b': _BR, '155e': _BR, '155d': _BR, '97dc': _BR, '1675': _BR, '1676': _BR,
    '1670': _BR, '1673': _BR, '1662': _BR, '97cb': _BR, '97ce': _BR_IT, '97cd': _BR,
    '92c4': _BR, '92c7': _BR, '92c1': _BR, '92c2': _BR, '1551': _BR, '97d5': _BR,
    '97d6': _BR, '1552': _BR, '97d0': _BR, '1554': _BR, '1557': _BR, '97d3': _BR,
    '1558': _BR, '167f': _BR, '137f': _BR, '167a': _BR, '92d9': _BR, '92d0': _BR,
    '92d3': _BR, '92d5': _BR, '92d6': _BR, '10dc': _BR, '9262': _BR, '9261': _BR,
    '91f8': _BR, '10df': _BR, '9264': _BR, '91f4': _BR, '91f7': _BR, '91f1': _BR,
    '91f2': _BR, '97d9': _BR, '9149': _BR, '9143': _BR, '9140': _BR, '9146': _BR,
    '9145': _BR, '9464': _BR, '9467': _BR, '9461': _BR, '9462': _BR, '9468': _BR,
    '914c': _BR, '914a': _BR, '914f': _BR_IT, '10d3': _BR, '926b': _BR, '10d0': _BR,
    '10d6': _BR, '926e': _BR_IT, '926d': _BR, '91fd': _BR, '91fe': _BR, '10d9': _BR,
    '91fb': _BR, '91fc': _BR, '946e': _BR_IT, '946d': _BR, '946b': _BR, '10da': _BR,
    '10d5': _BR, '9267': _BR, '9268': _BR, '16df': _BR, '16da': _BR, '16dc': _BR,
    '9454': _BR, '9457': _BR, '9451': _BR, '9452': _BR, '136d': _BR, '136e': _BR_IT,
    '136b': _BR, '13d9': _BR, '13da': _BR, '13dc': _BR, '13df': _BR, '1568': _BR,
    '1561': _BR, '1564': _BR, '1567': _BR, '16d5': _BR, '16d6': _BR, '16d0': _BR,
    '16d3': _BR, '945d': _BR, '945e': _BR, '16d9': _BR, '945b': _BR, '156b': _BR,
    '156d': _BR, '156e': _BR_IT, '105b': _BR, '1364': _BR, '1368': _BR, '1361': _BR,
    '13d0': _BR, '13d3': _BR, '13d5': _BR, '13d6': _BR, '97a1': _NOP, '97a2': _NOP,
    '9723': _NOP, '94a1': _NOP, '94a4': _NOP, '94ad': _NOP, '1020': _NOP, '10a1': _NOP,
    '10a2': _NOP, '1023': _NOP, '10a4': _NOP, '1025': _NOP, '1026': _NOP, '10a7': _NOP,
    '10a8': _NOP, '1029': _NOP, '102a': _NOP, '10ab': _NOP, '102c': _NOP, '10ad': _NOP,
    '10ae': _NOP, '102f': _NOP, '97ad': _NOP, '97a4': _NOP, '9725': _NOP, '9726': _NOP,
    '97a7': _NOP, '97a8': _NOP, '9729': _NOP, '972a': _NOP, '9120': _END_IT, '91a1': _NOP,
    '91a2': _NOP, '9123': _NOP, '91a4': _NOP, '9125': _NOP, '9126': _NOP, '91a7': _NOP,
    '91a8': _NOP, '9129': _NOP, '912a': _NOP, '91ab': _NOP, '912c': _NOP, '91ad': _NOP,
    '97ae': _NOP, '972f': _NOP, '91ae': _IT, '912f': _IT, '94a8': _NOP, '9423': _NOP,
    '94a2': _NOP,
}

_CHARACTERS = {
    '20': ' ', 'a1': '!', 'a2': '"', '23': '#', 'a4': '$', '25': '%', '26': '&', 'a7': "'",
    'a8': '(', '29': ')', '2a': 'á', 'ab': '+', '2c': ',', 'ad': '-', 'ae': '.', '2f': '/',
    'b0': '0', '31': '1', '32': '2', 'b3': '3', '34': '4', 'b5': '5', 'b6': '6', '37': '7',
    '38': '8', 'b9': '9', 'ba': ':', '3b': ';', 'bc': '<', '3d': '=', '3e': '>', 'bf': '?',
    '40': '@', 'c1': 'A', 'c2': 'B', '43': 'C', 'c4': 'D', '45': 'E', '46': 'F', 'c7': 'G',
    'c8': 'H', '49': 'I', '4a': 'J', 'cb': 'K', '4c': 'L', 'cd': 'M', 'ce': 'N', '4f': 'O',
    'd0': 'P', '51': 'Q', '52': 'R', 'd3': 'S', '54': 'T', 'd5': 'U', 'd6': 'V', '57': 'W',
    '58': 'X', 'd9': 'Y', 'da': 'Z', '5b': '[', 'dc': 'é', '5d': ']', '5e': 'í', 'df': 'ó',
    'e0': 'ú', '61': 'a', '62': 'b', 'e3': 'c', '64': 'd', 'e5': 'e', 'e6': 'f', '67': 'g',
    '68': 'h', 'e9': 'i', 'ea': 'j', '6b': 'k', 'ec': 'l', '6d': 'm', '6e': 'n', 'ef': 'o',
    '70': 'p', 'f1': 'q', 'f2': 'r', '73': 's', 'f4': 't', '75': 'u', '76': 'v', 'f7': 'w',
    'f8': 'x', '79': 'y', '7a': 'z', 'fb': 'ç', '7c': '÷', 'fd': 'Ñ', 'fe': 'ñ', '7f': '',
    '80': '',
}

_SPECIAL_CHARACTERS = {
    '91b0': '®', '9131': '°', '9132': '½', '91b3': '¿', '9134': '™', '91b5': '¢',
    '91b6': '£', '9137': '♪', '9138': 'à', '91b9': ' ', '91ba': 'è', '913b': 'â',
    '91bc': 'ê', '913d': 'î', '913e': 'ô', '91bf': 'û',
}

_EXTENDED_CHARACTERS = {
    '9220': 'Á', '92a1': 'É', '92a2': 'Ó', '9223': 'Ú', '92a4': 'Ü', '9225': 'ü',
    '9226': '‘', '92a7': '¡', '92a8': '*', '9229': '’', '922a': '—', '92ab': '©',
    '922c': '℠', '92ad': '•', '92ae': '“', '922f': '”', '92b0': 'À', '9231': 'Â',
    '9232': 'Ç', '92b3': 'È', '9234': 'Ê', '92b5': 'Ë', '92b6': 'ë', '9237': 'Î',
    '9238': 'Ï', '92b9': 'ï', '92ba': 'Ô', '923b': 'Ù', '92bc': 'ù', '923d': 'Û',
    '923e': '«', '92bf': '»', '1320': 'Ã', '13a1': 'ã', '13a2': 'Í', '1323': 'Ì',
    '13a4': 'ì', '1325': 'Ò', '1326': 'ò', '13a7': 'Õ', '13a8': 'õ', '1329': '{',
    '132a': '}', '13ab': '\\', '132c': '^', '13ad': '_', '13ae': '¦', '132f': '~',
    '13b0': 'Ä', '1331': 'ä', '1332': 'Ö', '13b3': 'ö', '1334': 'ß', '13b5': '¥',
    '13b6': '¤', '1337': '|', '1338': 'Å', '13b9': 'å', '13ba': 'Ø', '133b': 'ø',
    '13bc': '┌', '133d': '┐', '133e': '└', '13bf': '┘',
}

COMMANDS = MappingProxyType(_COMMANDS)
CHARACTERS = MappingProxyType(_CHARACTERS)
SPECIAL_CHARACTERS = MappingProxyType(_SPECIAL_CHARACTERS)
EXTENDED_CHARACTERS = MappingProxyType(_EXTENDED_CHARACTERS)

def _invert(table : dict[str, str]) -> MappingProxyType:
    """ Map characters back to codes, keeping the first code listed for each character """
    inverted : dict[str, str] = {}
    for code, character in table.items():
        if character and character not in inverted:
            inverted[character] = code
    return MappingProxyType(inverted)

CHARACTER_CODES = _invert(_CHARACTERS)
SPECIAL_CHARACTER_CODES = _invert(_SPECIAL_CHARACTERS)
EXTENDED_CHARACTER_CODES = _invert(_EXTENDED_CHARACTERS)

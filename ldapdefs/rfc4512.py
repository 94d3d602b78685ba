"""Translations of ABNF specs to regex from RFC 4512

https://tools.ietf.org/html/rfc4512
"""

import re

from .utils import re_anchor

ALPHA = r'[A-Za-z]'
DIGIT = r'[0-9]'
LDIGIT = r'[1-9]'

keychar = r'[A-Za-z0-9-]' # ALPHA / DIGIT / HYPHEN
keystring = ALPHA + keychar + r'*'

number = r'(?:' + DIGIT + r'|' + LDIGIT + DIGIT + r'+)'
numericoid = DIGIT + r'+(?:\.' + DIGIT + r'+)+'
descr = keystring

# tolerated in place of descr when malformed names are allowed
lenient_descr = ALPHA + r'[A-Za-z0-9_.;-]*'

len_ = number
ruleid = number

QQ = r'\\27'
QS = r'\\5[Cc]'

usages = (
    'userApplications',
    'directoryOperation',
    'distributedOperation',
    'dSAOperation',
)

ROOT_OBJECT_CLASS = 'top'
ROOT_OBJECT_CLASS_OID = '2.5.6.0'

re_numericoid = re.compile(re_anchor(numericoid))
re_descr = re.compile(re_anchor(descr))
re_lenient_descr = re.compile(re_anchor(lenient_descr))
re_ruleid = re.compile(re_anchor(ruleid))
re_len = re.compile(re_anchor(len_))
re_escape = re.compile(QQ + r'|' + QS)

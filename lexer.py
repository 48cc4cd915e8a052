import ply.lex as lex
from ply.lex import TOKEN

OPERATORS = ('+', '-', '*', '/', '%')

tokens = ['NUM', 'OP', 'OPEN', 'CLOSE']

# Αγνόηση κενών (μόνο ο χαρακτήρας space, όχι tab)
t_ignore = ' '

# Χειρισμός νέας γραμμής
def t_newline(t):
    r'\n+'
    t.lexer.lineno += len(t.value)

# Ένα ψηφίο = ένας αριθμός. Το "12" δίνει δύο NUM tokens (1 και 2), δεν υπάρχουν πολυψήφιοι
@TOKEN(r'[0-9]')
def t_NUM(t):
    t.value = int(t.value) #Μετατροπή σε integer
    return t

@TOKEN(r'[+\-*/%]')
def t_OP(t):
    return t

def t_OPEN(t):
    r'\('
    return t

# Οτιδήποτε άλλο (κανονικά μόνο ')') γίνεται CLOSE και κρατάει τον χαρακτήρα,
# ώστε ο parser να ξεχωρίσει το ')' από άγνωστους τελεστές
def t_CLOSE(t):
    r'.'
    return t

# Χειρισμός σφαλμάτων: το t_CLOSE πιάνει κάθε χαρακτήρα, οπότε εδώ φτάνουμε μόνο αν αλλάξουν οι κανόνες
def t_error(t):
    t.lexer.skip(1) #αποφυγη λουπας


# Δημιουργία lexer
lexer = lex.lex()


def tokenize(text):
    # Επιστρέφει λίστα από LexToken (type, value, lineno, lexpos) για μία είσοδο.
    # Δουλεύουμε σε clone ώστε κάθε κλήση να ξεκινά από καθαρή κατάσταση (lineno=1, pos=0).
    lx = lexer.clone()
    lx.lineno = 1
    lx.input(text)
    return list(lx)

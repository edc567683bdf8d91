"""
Built-in common English word list.

Used when no bundled word list file is available, so swipe decoding still
works out of the box.
"""

COMMON_WORDS_TEXT = """
a about above across add after again against age ago air all almost alone along already also although always am among an and animal another answer any are area around as ask at away
back bad ball base be bear beat beautiful became because become bed been before began begin behind being believe below best better between big bird black blue boat body book both bottom box boy bread break bring brother brought build built burn business but buy by
call came can car care carry case cat catch cause cell center century certain change character check child children choose city class clear close cloud cold color come common complete condition consider contain continue control could country course cover create cross cry current cut
dad dark day dead deal dear death decide deep degree describe design determine develop did die difference different difficult direct do doctor does dog done door down draw dream dress drink drive drop dry during
each early earth ease east easy eat edge education effect eight either else end energy enough enter entire even evening ever every everyone everything evidence exactly example experience eye
face fact fair fall family far fast father fear feel feet fell felt few field fight figure fill final finally find fine finger finish fire first fish five floor fly follow food foot for force form forward found four free friend from front full
game garden gas gave general get girl give glad glass go god goes gold gone good got government great green ground group grow guard guess gun
had hair half hand happen happy hard has hat have he head hear heard heart heat heavy held hello help her here high him himself his history hit hold home hope horse hospital hot hour house how however huge human hundred
i idea if image imagine important in include increase indeed indicate industry information inside instead interest into is island issue it its itself
job join just keep kept key kid kill kind king knew know knowledge
lady land language large last late later laugh law lay lead learn least leave led left leg less let letter level lie life light like line list listen little live long look lose lost lot love low
made main make man manage many map mark market matter may maybe me mean measure meet member memory men message method middle might mile military million mind minute miss modern moment money month more morning most mother mountain move movement much music must my myself
name nation natural nature near nearly necessary need never new news next nice night nine no none nor north not note nothing notice now number
object of off offer office often oh oil ok old on once one only open or order other our out outside over own
page pain paint pair paper parent part particular party pass past pattern pay peace people per perform perhaps period person pick picture piece place plan plant play player point poor popular population position possible power practice prepare present president press pretty prevent probably problem process produce product program project prove provide public pull purpose push put
question quick quickly quiet quite
race radio raise range rate rather reach read ready real realize really reason receive recent recently record red reduce region relate remember remove report represent require research rest result return reveal rich right rise river road rock role room rule run
safe said sale same save say scene school science sea season seat second section see seem sell send sense sent serious serve service set seven several shall share she ship short should show side sign similar simple simply since sing single sister sit site situation six size skill skin small smile so social society soft some someone something sometimes son song soon sort sound south space speak special specific speech spend sport spread spring staff stage stand star start state statement station stay step still stock stop store story straight strategy street strong student study stuff style subject success such suddenly suffer suggest summer support sure surface system
table take talk task teach teacher team technology tell ten term test than thank that the their them themselves then theory there these they thing think third this those though thought thousand three through throughout throw thus time to today together told tomorrow tonight too took top total touch toward town trade traditional training travel treat treatment tree trial trip trouble true truth try turn two type
under understand unit until up upon us use usually
value various very view violence visit voice vote
wait walk wall want war warm was watch water wave way we weapon wear week weight well were west what when where whether which while white who whole whom whose why wide wife will win wind window wish with within without woman wonder word work worker world worry would write writer wrong
year yes yet you young your yourself
google search research internet website computer phone keyboard message email text hello world test testing example sample question answer solution problem issue error warning notice information data result output input value string array list dictionary object function method property type
"""


def unique_words(words):
    """Drop repeated words, keeping the first occurrence."""
    seen = set()
    result = []
    for word in words:
        if word not in seen:
            seen.add(word)
            result.append(word)
    return result


def builtin_words():
    return unique_words(COMMON_WORDS_TEXT.split())

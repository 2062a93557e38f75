"""Built-in IBAN country dataset.

Source: SWIFT IBAN Registry (release 95)
Reference: https://www.swift.com/standards/data-standards/iban-international-bank-account-number

Each row carries the BBAN structure in SWIFT notation (``<count>!<class>`` with
``n`` digits, ``a`` uppercase letters, ``c`` uppercase letters and digits), the
total IBAN length and the SEPA flag. Patterns exclude the country code and the
two check digits, so every pattern sums to ``length - 4``.
"""

from .country import IbanCountry

COUNTRIES: tuple[IbanCountry, ...] = (
    # Europe: SEPA
    IbanCountry(code="AD", name="Andorra", bban_pattern="4!n4!n12!c", length=24, is_sepa=True,
                example="AD1200012030200359100100"),
    IbanCountry(code="AT", name="Austria", bban_pattern="5!n11!n", length=20, is_sepa=True,
                example="AT611904300234573201"),
    IbanCountry(code="BE", name="Belgium", bban_pattern="3!n7!n2!n", length=16, is_sepa=True,
                example="BE68539007547034"),
    IbanCountry(code="BG", name="Bulgaria", bban_pattern="4!a4!n2!n8!c", length=22, is_sepa=True,
                example="BG80BNBG96611020345678"),
    IbanCountry(code="CH", name="Switzerland", bban_pattern="5!n12!c", length=21, is_sepa=True,
                example="CH9300762011623852957"),
    IbanCountry(code="CY", name="Cyprus", bban_pattern="3!n5!n16!c", length=28, is_sepa=True,
                example="CY17002001280000001200527600"),
    IbanCountry(code="CZ", name="Czech Republic", bban_pattern="4!n6!n10!n", length=24, is_sepa=True,
                example="CZ6508000000192000145399"),
    IbanCountry(code="DE", name="Germany", bban_pattern="8!n10!n", length=22, is_sepa=True,
                example="DE89370400440532013000"),
    IbanCountry(code="DK", name="Denmark", bban_pattern="4!n9!n1!n", length=18, is_sepa=True,
                example="DK5000400440116243"),
    IbanCountry(code="EE", name="Estonia", bban_pattern="2!n2!n11!n1!n", length=20, is_sepa=True,
                example="EE382200221020145685"),
    IbanCountry(code="ES", name="Spain", bban_pattern="4!n4!n1!n1!n10!n", length=24, is_sepa=True,
                example="ES9121000418450200051332"),
    IbanCountry(code="FI", name="Finland", bban_pattern="3!n11!n", length=18, is_sepa=True,
                example="FI2112345600000785"),
    IbanCountry(code="FR", name="France", bban_pattern="5!n5!n11!c2!n", length=27, is_sepa=True,
                example="FR1420041010050500013M02606"),
    IbanCountry(code="GB", name="United Kingdom", bban_pattern="4!a6!n8!n", length=22, is_sepa=True,
                example="GB29NWBK60161331926819"),
    IbanCountry(code="GI", name="Gibraltar", bban_pattern="4!a15!c", length=23, is_sepa=True,
                example="GI75NWBK000000007099453"),
    IbanCountry(code="GR", name="Greece", bban_pattern="3!n4!n16!c", length=27, is_sepa=True,
                example="GR1601101250000000012300695"),
    IbanCountry(code="HR", name="Croatia", bban_pattern="7!n10!n", length=21, is_sepa=True,
                example="HR1210010051863000160"),
    IbanCountry(code="HU", name="Hungary", bban_pattern="3!n4!n1!n15!n1!n", length=28, is_sepa=True,
                example="HU42117730161111101800000000"),
    IbanCountry(code="IE", name="Ireland", bban_pattern="4!a6!n8!n", length=22, is_sepa=True,
                example="IE29AIBK93115212345678"),
    IbanCountry(code="IS", name="Iceland", bban_pattern="4!n2!n6!n10!n", length=26, is_sepa=True,
                example="IS140159260076545510730339"),
    IbanCountry(code="IT", name="Italy", bban_pattern="1!a5!n5!n12!c", length=27, is_sepa=True,
                example="IT60X0542811101000000123456"),
    IbanCountry(code="LI", name="Liechtenstein", bban_pattern="5!n12!c", length=21, is_sepa=True,
                example="LI21088100002324013AA"),
    IbanCountry(code="LT", name="Lithuania", bban_pattern="5!n11!n", length=20, is_sepa=True,
                example="LT121000011101001000"),
    IbanCountry(code="LU", name="Luxembourg", bban_pattern="3!n13!c", length=20, is_sepa=True,
                example="LU280019400644750000"),
    IbanCountry(code="LV", name="Latvia", bban_pattern="4!a13!c", length=21, is_sepa=True,
                example="LV80BANK0000435195001"),
    IbanCountry(code="MC", name="Monaco", bban_pattern="5!n5!n11!c2!n", length=27, is_sepa=True,
                example="MC5811222000010123456789030"),
    IbanCountry(code="MT", name="Malta", bban_pattern="4!a5!n18!c", length=31, is_sepa=True,
                example="MT84MALT011000012345MTLCAST001S"),
    IbanCountry(code="NL", name="Netherlands", bban_pattern="4!a10!n", length=18, is_sepa=True,
                example="NL91ABNA0417164300"),
    IbanCountry(code="NO", name="Norway", bban_pattern="4!n6!n1!n", length=15, is_sepa=True,
                example="NO9386011117947"),
    IbanCountry(code="PL", name="Poland", bban_pattern="8!n16!n", length=28, is_sepa=True,
                example="PL61109010140000071219812874"),
    IbanCountry(code="PT", name="Portugal", bban_pattern="4!n4!n11!n2!n", length=25, is_sepa=True,
                example="PT50000201231234567890154"),
    IbanCountry(code="RO", name="Romania", bban_pattern="4!a16!c", length=24, is_sepa=True,
                example="RO49AAAA1B31007593840000"),
    IbanCountry(code="SE", name="Sweden", bban_pattern="3!n16!n1!n", length=24, is_sepa=True,
                example="SE4550000000058398257466"),
    IbanCountry(code="SI", name="Slovenia", bban_pattern="5!n8!n2!n", length=19, is_sepa=True,
                example="SI56263300012039086"),
    IbanCountry(code="SK", name="Slovakia", bban_pattern="4!n6!n10!n", length=24, is_sepa=True,
                example="SK3112000000198742637541"),
    IbanCountry(code="SM", name="San Marino", bban_pattern="1!a5!n5!n12!c", length=27, is_sepa=True,
                example="SM86U0322509800000000270100"),
    IbanCountry(code="VA", name="Vatican City State", bban_pattern="3!n15!n", length=22, is_sepa=True,
                example="VA59001123000012345678"),
    # Europe: non-SEPA
    IbanCountry(code="AL", name="Albania", bban_pattern="8!n16!c", length=28,
                example="AL47212110090000000235698741"),
    IbanCountry(code="BA", name="Bosnia and Herzegovina", bban_pattern="3!n3!n8!n2!n", length=20,
                example="BA391290079401028494"),
    IbanCountry(code="BY", name="Belarus", bban_pattern="4!c4!n16!c", length=28,
                example="BY13NBRB3600900000002Z00AB00"),
    IbanCountry(code="FO", name="Faroe Islands", bban_pattern="4!n9!n1!n", length=18,
                example="FO6264600001631634"),
    IbanCountry(code="GL", name="Greenland", bban_pattern="4!n9!n1!n", length=18,
                example="GL8964710001000206"),
    IbanCountry(code="MD", name="Moldova", bban_pattern="2!c18!c", length=24,
                example="MD24AG000225100013104168"),
    IbanCountry(code="ME", name="Montenegro", bban_pattern="3!n13!n2!n", length=22,
                example="ME25505000012345678951"),
    IbanCountry(code="MK", name="North Macedonia", bban_pattern="3!n10!c2!n", length=19,
                example="MK07250120000058984"),
    IbanCountry(code="RS", name="Serbia", bban_pattern="3!n13!n2!n", length=22,
                example="RS35260005601001611379"),
    IbanCountry(code="RU", name="Russia", bban_pattern="9!n5!n15!c", length=33,
                example="RU0304452522540817810538091310419"),
    IbanCountry(code="TR", name="Turkey", bban_pattern="5!n1!n16!c", length=26,
                example="TR330006100519786457841326"),
    IbanCountry(code="UA", name="Ukraine", bban_pattern="6!n19!c", length=29,
                example="UA213223130000026007233566001"),
    IbanCountry(code="XK", name="Kosovo", bban_pattern="4!n10!n2!n", length=20,
                example="XK051212012345678906"),
    # Middle East & Asia
    IbanCountry(code="AE", name="United Arab Emirates", bban_pattern="3!n16!n", length=23,
                example="AE070331234567890123456"),
    IbanCountry(code="AZ", name="Azerbaijan", bban_pattern="4!a20!c", length=28,
                example="AZ21NABZ00000000137010001944"),
    IbanCountry(code="BH", name="Bahrain", bban_pattern="4!a14!c", length=22,
                example="BH67BMAG00001299123456"),
    IbanCountry(code="GE", name="Georgia", bban_pattern="2!a16!n", length=22,
                example="GE29NB0000000101904917"),
    IbanCountry(code="IL", name="Israel", bban_pattern="3!n3!n13!n", length=23,
                example="IL620108000000099999999"),
    IbanCountry(code="IQ", name="Iraq", bban_pattern="4!a3!n12!n", length=23,
                example="IQ98NBIQ850123456789012"),
    IbanCountry(code="JO", name="Jordan", bban_pattern="4!a4!n18!c", length=30,
                example="JO94CBJO0010000000000131000302"),
    IbanCountry(code="KW", name="Kuwait", bban_pattern="4!a22!c", length=30,
                example="KW81CBKU0000000000001234560101"),
    IbanCountry(code="KZ", name="Kazakhstan", bban_pattern="3!n13!c", length=20,
                example="KZ86125KZT5004100100"),
    IbanCountry(code="LB", name="Lebanon", bban_pattern="4!n20!c", length=28,
                example="LB62099900000001001901229114"),
    IbanCountry(code="PK", name="Pakistan", bban_pattern="4!a16!c", length=24,
                example="PK36SCBL0000001123456702"),
    IbanCountry(code="PS", name="Palestine", bban_pattern="4!a21!c", length=29,
                example="PS92PALS000000000400123456702"),
    IbanCountry(code="QA", name="Qatar", bban_pattern="4!a21!c", length=29,
                example="QA58DOHB00001234567890ABCDEFG"),
    IbanCountry(code="SA", name="Saudi Arabia", bban_pattern="2!n18!c", length=24,
                example="SA0380000000608010167519"),
    IbanCountry(code="TL", name="Timor-Leste", bban_pattern="3!n14!n2!n", length=23,
                example="TL380080012345678910157"),
    # Africa
    IbanCountry(code="EG", name="Egypt", bban_pattern="4!n4!n17!n", length=29,
                example="EG380019000500000000263180002"),
    IbanCountry(code="LY", name="Libya", bban_pattern="3!n3!n15!n", length=25,
                example="LY83002048000020100120361"),
    IbanCountry(code="MR", name="Mauritania", bban_pattern="5!n5!n11!n2!n", length=27,
                example="MR1300020001010000123456753"),
    IbanCountry(code="MU", name="Mauritius", bban_pattern="4!a2!n2!n12!n3!n3!a", length=30,
                example="MU17BOMM0101101030300200000MUR"),
    IbanCountry(code="SC", name="Seychelles", bban_pattern="4!a2!n2!n16!n3!a", length=31,
                example="SC18SSCB11010000000000001497USD"),
    IbanCountry(code="SD", name="Sudan", bban_pattern="2!n12!n", length=18,
                example="SD2129010501234001"),
    IbanCountry(code="TN", name="Tunisia", bban_pattern="2!n3!n13!n2!n", length=24,
                example="TN5910006035183598478831"),
    # Americas
    IbanCountry(code="BR", name="Brazil", bban_pattern="8!n5!n10!n1!a1!c", length=29,
                example="BR1800360305000010009795493C1"),
    IbanCountry(code="CR", name="Costa Rica", bban_pattern="4!n14!n", length=22,
                example="CR05015202001026284066"),
    IbanCountry(code="DO", name="Dominican Republic", bban_pattern="4!c20!n", length=28,
                example="DO28BAGR00000001212453611324"),
    IbanCountry(code="GT", name="Guatemala", bban_pattern="4!c20!c", length=28,
                example="GT82TRAJ01020000001210029690"),
    IbanCountry(code="LC", name="Saint Lucia", bban_pattern="4!a24!c", length=32,
                example="LC55HEMM000100010012001200023015"),
    IbanCountry(code="SV", name="El Salvador", bban_pattern="4!a20!n", length=28,
                example="SV62CENR00000000000000700025"),
    IbanCountry(code="VG", name="British Virgin Islands", bban_pattern="4!a16!n", length=24,
                example="VG96VPVG0000012345678901"),
)

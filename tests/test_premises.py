import textwrap

from core import detect_layout, extract_premises, parse_exam, split_stem


def test_no_roman_numerals_passes_body_through():
    parsed = extract_premises("  Soru\nmetni hangisidir?  ")
    assert parsed.question_stem == "Soru\nmetni hangisidir?"
    assert parsed.context_text == ""
    assert parsed.premise_items == []


def test_multiline_premises_split_stem_off_last_item():
    body = "Giris cumlesi.\nI. Birinci\nII. Ikinci\nIII. Ucuncu hangisi dogrudur?"
    parsed = extract_premises(body)
    assert parsed.context_text == "Giris cumlesi."
    assert parsed.premise_items == ["Birinci", "Ikinci", "Ucuncu"]
    assert parsed.question_stem == "hangisi dogrudur?"


def test_multiline_items_join_wrapped_lines():
    body = textwrap.dedent("""
        Bir ülkede yapılan reformlar:
        I. Vergi sistemi
           yenilenmiştir.

        II. Ordu düzenlenmiştir.
        III. Okullar açılmıştır. yargılarından hangileri doğrudur?
    """)
    parsed = extract_premises(body)
    assert parsed.premise_items == [
        "Vergi sistemi    yenilenmiştir.",
        "Ordu düzenlenmiştir.",
        "Okullar açılmıştır.",
    ]
    assert parsed.question_stem == "yargılarından hangileri doğrudur?"
    assert parsed.context_text == "Bir ülkede yapılan reformlar:"


def test_multiline_without_keyword_uses_intro_as_stem():
    parsed = extract_premises("Buna göre:\nI. a\nII. b ne olur?")
    assert parsed.question_stem == "Buna göre:"
    assert parsed.context_text == ""
    assert parsed.premise_items == ["a", "b ne olur?"]


def test_multiline_without_intro_or_keyword_uses_last_item():
    parsed = extract_premises("I. bir\nII. iki\nIII. üç nedir?")
    assert parsed.question_stem == "üç nedir?"
    assert parsed.context_text == ""
    assert parsed.premise_items == ["bir", "iki", "üç nedir?"]


def test_last_item_without_question_mark_is_not_split():
    parsed = extract_premises("Aşağıdakileri inceleyiniz.\nI. a hangisi\nII. b")
    assert parsed.question_stem == "Aşağıdakileri inceleyiniz."
    assert parsed.premise_items == ["a hangisi", "b"]


def test_inline_premises():
    body = "Osmanlı Devleti'nde I. Tımar, II. Devşirme, III. İltizam uygulamalarından hangileri klasik döneme aittir?"
    parsed = extract_premises(body)
    assert parsed.context_text == "Osmanlı Devleti'nde"
    assert parsed.premise_items == ["Tımar", "Devşirme", "İltizam uygulamalarından"]
    assert parsed.question_stem == "hangileri klasik döneme aittir?"


def test_inline_keywords_cut_at_earliest_keyword():
    parsed = extract_premises("Bir ülkede I. a, II. b, III. c Yukarıdakilerden hangisi söylenebilir?")
    assert parsed.premise_items == ["a", "b", "c"]
    assert parsed.question_stem == "Yukarıdakilerden hangisi söylenebilir?"


def test_inline_directional_keyword():
    parsed = extract_premises("Şu bölgeler: I. Ege, II. Akdeniz, III. Karadeniz bölgelerinden hangisine daha çok yağış düşer?")
    assert parsed.premise_items == ["Ege", "Akdeniz", "Karadeniz bölgelerinden"]
    assert parsed.question_stem == "hangisine daha çok yağış düşer?"


def test_inline_without_keyword_falls_back_to_intro():
    parsed = extract_premises("Şunlar verilmiştir: I. a, II. b nedir?")
    assert parsed.question_stem == "Şunlar verilmiştir:"
    assert parsed.context_text == ""
    assert parsed.premise_items == ["a", "b nedir?"]


def test_keyword_table_can_be_supplied_per_call():
    parsed = extract_premises("Giriş\nI. a\nII. b nedir?", keywords={"multiline": ["nedir"], "inline": []})
    assert parsed.premise_items == ["a", "b"]
    assert parsed.question_stem == "nedir?"
    assert parsed.context_text == "Giriş"


def test_split_stem():
    assert split_stem("Ucuncu hangisi dogrudur?", ["hangisi"]) == ("Ucuncu", "hangisi dogrudur?")
    assert split_stem("a Hangisi doğru?", ["hangisi"]) == ("a", "Hangisi doğru?")
    assert split_stem("a hangisi doğru", ["hangisi"]) == ("a hangisi doğru", "")
    # a keyword at the very start has no premise text in front of it
    assert split_stem("hangisi doğru?", ["hangisi"]) == ("hangisi doğru?", "")
    assert split_stem("a hangisi doğru?", []) == ("a hangisi doğru?", "")


def test_detect_layout():
    assert detect_layout("Soru metni?") is None
    assert detect_layout("Madde XI. bent nedir?") is None
    assert detect_layout("I. a\nII. b") == "multiline"
    assert detect_layout("Giriş\n  IV. a") == "multiline"
    assert detect_layout("Giriş I. a, II. b") == "inline"


def test_parse_exam_attaches_premises():
    text = textwrap.dedent("""
        3. Bir dönemde yapılan düzenlemelerle ilgili olarak,
        I. Vergi sistemi yenilenmiştir.
        II. Ordu yeniden düzenlenmiştir.
        III. Yeni okullar açılmıştır. yargılarından hangileri doğrudur?
        A) Yalnız I
        B) Yalnız II
        C) I ve II
        D) II ve III
        E) I, II ve III

        4. Hangisi bir başkenttir?
        A) Ankara
        B) İzmir

        ÇÖZÜMLER
        3. ÇÖZÜM: Üç düzenleme de aynı döneme aittir. CEVAP: E
    """)
    premises, plain = parse_exam(text)
    assert premises.context_text == "Bir dönemde yapılan düzenlemelerle ilgili olarak,"
    assert premises.premise_items == [
        "Vergi sistemi yenilenmiştir.",
        "Ordu yeniden düzenlenmiştir.",
        "Yeni okullar açılmıştır.",
    ]
    assert premises.question_stem == "yargılarından hangileri doğrudur?"
    assert premises.options[4] == "I, II ve III"
    assert premises.correct_option_index == 4
    assert plain.premise_items is None
    assert plain.context_text is None
    assert plain.question_stem == "Hangisi bir başkenttir?"

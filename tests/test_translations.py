from pathlib import Path
import yaml

TRANSLATIONS_DIR = Path(__file__).resolve().parent.parent / 'translations'


def _load(lang):
    with open(TRANSLATIONS_DIR / f'{lang}.yaml', encoding='utf-8') as f:
        return yaml.safe_load(f)


def test_telugu_covers_every_english_key():
    english, telugu = _load('en'), _load('te')
    assert set(english) - set(telugu) == set()


def test_placeholders_match():
    english, telugu = _load('en'), _load('te')
    for key, text in english.items():
        for placeholder in ('{min_length}', '{max_length}'):
            assert (placeholder in text) == (placeholder in telugu[key]), key


def test_telugu_admin_error(client, super_admin, login):
    login('9999999999', 'admin123')
    response = client.post('/api/admin/invites', json={'role': 'VOTER'},
                           headers={'Accept-Language': 'te'})
    assert response.status_code == 400
    assert response.get_json() == {'error': 'సరైన పాత్ర అవసరం (CADRE, LEADER, లేదా ADMIN)'}

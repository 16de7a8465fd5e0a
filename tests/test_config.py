from marketplace.core.config import parse_cors_origins, parse_email_list


def test_parse_cors_origins_csv():
    value = "http://localhost:5173, http://localhost:3000"
    assert parse_cors_origins(value) == [
        "http://localhost:5173",
        "http://localhost:3000",
    ]


def test_parse_cors_origins_json_list():
    value = '["http://localhost:5173", "https://fesa.example.com"]'
    assert parse_cors_origins(value) == [
        "http://localhost:5173",
        "https://fesa.example.com",
    ]


def test_parse_cors_origins_deduplicates():
    value = "http://localhost:5173,http://localhost:5173"
    assert parse_cors_origins(value) == ["http://localhost:5173"]


def test_parse_email_list_normalizes():
    assert parse_email_list(" Admin@Example.com, ,ops@example.com ") == [
        "admin@example.com",
        "ops@example.com",
    ]
    assert parse_email_list("") == []

from common.alert_rules.models import AlertKind, Priority
from common.alert_rules.rules.sw_index_expired import SW_INDEX_EXPIRED


def test_sw_index_expired_fires_on_expired_status(make_record, make_ctx, recipient):
    res = SW_INDEX_EXPIRED().evaluate(make_record(sw_status="Expired", sw_date="2019-06-01"), make_ctx())
    assert len(res) == 1
    n = res[0]
    assert n.kind == AlertKind.SW_INDEX_EXPIRED
    assert n.priority == Priority.CRITICAL
    assert n.recipient == recipient
    assert n.subject == "SW Index EXPIRED: PARMA 12345"
    assert "last audit: 2019-06-01" in n.body


def test_sw_index_other_statuses_do_not_fire(make_record, make_ctx):
    for status in ("Approved", "Not approved", "Approved with conditions", None):
        assert SW_INDEX_EXPIRED().evaluate(make_record(sw_status=status), make_ctx()) == []


def test_sw_index_expired_without_date_renders_placeholder(make_record, make_ctx):
    res = SW_INDEX_EXPIRED().evaluate(make_record(sw_status="Expired"), make_ctx())
    assert "last audit: N/A" in res[0].body

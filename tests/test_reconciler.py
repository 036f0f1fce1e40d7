from taskdns.models import ChangeOp
from taskdns.reconciler import reconcile


def test_stale_record_is_repointed_at_orphan_ip():
    changes, unresolved = reconcile(
        ["10.0.0.1", "10.0.0.2"],
        {"a.svc": "10.0.0.1", "b.svc": "10.0.0.9"},
    )

    assert changes == [ChangeOp(name="b.svc", ip="10.0.0.2")]
    assert unresolved == []


def test_consistent_state_yields_no_changes():
    changes, unresolved = reconcile(["10.0.0.1"], {"a.svc": "10.0.0.1"})

    assert changes == []
    assert unresolved == []


def test_orphans_without_spare_records_are_reported():
    changes, unresolved = reconcile(
        ["10.0.0.1", "10.0.0.2", "10.0.0.3"],
        {"a.svc": "10.0.0.1"},
    )

    assert changes == []
    assert unresolved == ["10.0.0.2", "10.0.0.3"]


def test_no_tasks_leaves_stale_records_in_place():
    changes, unresolved = reconcile([], {"a.svc": "10.0.0.1"})

    assert changes == []
    assert unresolved == []


def test_pairs_invalid_records_and_orphans_in_input_order():
    changes, unresolved = reconcile(
        ["10.0.0.5", "10.0.0.6"],
        {"a.svc": "10.0.0.9", "b.svc": "10.0.0.8"},
    )

    assert changes == [
        ChangeOp(name="a.svc", ip="10.0.0.5"),
        ChangeOp(name="b.svc", ip="10.0.0.6"),
    ]
    assert unresolved == []


def test_extra_invalid_records_are_left_untouched():
    changes, unresolved = reconcile(
        ["10.0.0.5"],
        {"a.svc": "10.0.0.9", "b.svc": "10.0.0.8", "c.svc": "10.0.0.7"},
    )

    assert changes == [ChangeOp(name="a.svc", ip="10.0.0.5")]
    assert unresolved == []


def test_duplicate_task_ip_claims_a_stale_record_on_its_own():
    changes, unresolved = reconcile(
        ["10.0.0.1", "10.0.0.1"],
        {"a.svc": "10.0.0.1", "b.svc": "10.0.0.9"},
    )

    assert changes == [ChangeOp(name="b.svc", ip="10.0.0.1")]
    assert unresolved == []


def test_two_records_on_one_ip_claim_a_single_occurrence_each():
    changes, unresolved = reconcile(
        ["10.0.0.1", "10.0.0.2"],
        {"a.svc": "10.0.0.1", "b.svc": "10.0.0.1"},
    )

    assert changes == []
    assert unresolved == ["10.0.0.2"]


def test_empty_inputs():
    assert reconcile([], {}) == ([], [])


def test_change_count_is_min_of_invalid_records_and_orphans():
    task_ips = ["10.0.1.%d" % i for i in range(1, 8)]
    record_map = {"r%d.svc" % i: "10.9.9.%d" % i for i in range(4)}
    record_map["live.svc"] = "10.0.1.1"

    changes, unresolved = reconcile(task_ips, record_map)

    assert len(changes) == min(4, 6)
    assert unresolved == ["10.0.1.6", "10.0.1.7"]
    assert len({change.name for change in changes}) == len(changes)
    assert len({change.ip for change in changes}) == len(changes)
    assert "live.svc" not in {change.name for change in changes}


def test_result_is_deterministic_for_the_same_input_order():
    task_ips = ["10.0.0.3", "10.0.0.1", "10.0.0.2"]
    record_map = {"c.svc": "10.1.0.1", "a.svc": "10.0.0.1", "b.svc": "10.1.0.2"}

    assert reconcile(task_ips, record_map) == reconcile(list(task_ips), dict(record_map))


def test_change_op_renders_route53_upsert():
    assert ChangeOp(name="a.svc.", ip="10.0.0.1").to_change() == {
        "Action": "UPSERT",
        "ResourceRecordSet": {
            "Name": "a.svc.",
            "Type": "A",
            "TTL": 300,
            "ResourceRecords": [{"Value": "10.0.0.1"}],
        },
    }

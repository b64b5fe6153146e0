from receipt_processor.cli import main


def test_cli_prints_breakdown_and_settlement(write_receipt, tmp_path, capsys):
    write_receipt("oskars.check", "oskars pirka\n2 bread r\n# shared\n1.50 x2 milk a\n")
    write_receipt("raitis.check", "raitis pirka\n1 jam o\n1 x1 beer a\n")
    write_receipt("broken.check", "raitis hello\n")
    write_receipt("readme.md", "# not a receipt\n")

    assert main([str(tmp_path)]) == 0

    out = capsys.readouterr().out
    assert "All people who made purchases: oskars, raitis" in out
    assert "oskars spent a total of\n3.00 GBP on all\n2.00 GBP on raitis" in out
    assert "raitis spent a total of\n1.00 GBP on all\n1.00 GBP on oskars" in out
    # raitis: 200 + 300 // 2 = 350, oskars: 100 + 100 // 2 = 150
    assert "raitis owes oskars 2.00 GBP!" in out


def test_cli_single_file_without_settlement(write_receipt, capsys):
    path = write_receipt("anna.check", "anna pirka\n4 x2 coffee b\n")

    assert main([str(path), "--no-settlement"]) == 0

    out = capsys.readouterr().out
    assert "anna spent a total of\n8.00 GBP on Person b" in out
    assert "owes" not in out


def test_cli_skips_settlement_for_strangers(write_receipt, capsys):
    path = write_receipt("anna.check", "anna pirka\n4 coffee b\n")
    assert main([str(path)]) == 0
    assert "owes" not in capsys.readouterr().out


def test_cli_missing_path(tmp_path):
    assert main([str(tmp_path / "missing")]) == 1

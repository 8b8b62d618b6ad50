raise SystemExit("package exits while importing")

import sqlite3, os, sys
from core.database import resolve_db_path

DB = resolve_db_path(sys.argv[1] if len(sys.argv) > 1 else None)
print('DB:', DB, 'exists:', os.path.exists(DB))
if not os.path.exists(DB):
    sys.exit(1)
con = sqlite3.connect(DB)
cur = con.cursor()
cur.execute("PRAGMA table_info('patients')")
cols = [r[1] for r in cur.fetchall()]
print('patients cols:', cols)
cur.execute("SELECT COUNT(*) FROM patients")
print('rows:', cur.fetchone()[0])
cur.execute("SELECT id, record_number, name, age, phone_number, created_at FROM patients ORDER BY id DESC LIMIT 10")
for r in cur.fetchall():
    print(r)
con.close()

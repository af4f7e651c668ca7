# hash_passcode.py
# Prints the OWNER_PASSCODE_HASH value for a chosen owner dashboard passcode.
import getpass

from simlog_app.auth import pwd_context

passcode = getpass.getpass("Owner passcode: ")
print(f"OWNER_PASSCODE_HASH={pwd_context.hash(passcode)}")

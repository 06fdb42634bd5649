from fileman.cmd_base import Base
from fileman.mounts import MountsReader


class Lsblk(Base):
    USAGE = "lsblk"
    SUMMARY = "show the mounted disks and their file system types"

    def run(self) -> None:
        reader = MountsReader(str(self.config.get(["core", "mounts"])))

        try:
            for entry in reader.block_devices():
                self.println(f"Name: {entry.where} Type: {entry.fstype}")
        except OSError as e:
            self.fail(f"cannot read mount table {reader.path}: {e.strerror}")

        self.exit(0)

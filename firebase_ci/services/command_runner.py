"""
Command Runner

Runs external commands from argv lists, teeing their output to the current
process while buffering it for inspection.
"""

import codecs
import os
import selectors
import subprocess
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Type

from firebase_ci.constants import NPM_WARNING_MARKER
from firebase_ci.exceptions import CommandError
from firebase_ci.logger import CiLogger
from firebase_ci.models.results import ExecutionResult

READ_CHUNK_SIZE = 4096
REDACTED = "***"


class CommandRunner:
    """
    Execute external commands without a shell.

    Responsibilities:
    - Stream child stdout/stderr to our own stdout/stderr in real time
    - Buffer both streams for post-hoc success/failure inspection
    - Treat npm warning output on a non-zero exit as success
    - Raise a CommandError (or subclass) annotated with stderr on failure;
      reporting it is left to the caller
    """

    def __init__(
        self,
        logger: CiLogger,
        cwd: Optional[Path] = None,
        env: Optional[Dict[str, str]] = None,
    ):
        self.logger = logger
        self.cwd = cwd
        self.env = env

    def run(
        self,
        args: Sequence[str],
        before_msg: Optional[str] = None,
        success_msg: Optional[str] = None,
        error_msg: Optional[str] = None,
        pipe_output: bool = True,
        error_cls: Type[CommandError] = CommandError,
        redact: Sequence[str] = (),
    ) -> ExecutionResult:
        """
        Run a command and wait for it to finish.

        Args:
            args: Command and arguments (never interpreted by a shell)
            before_msg: Info message logged before starting
            success_msg: Success message logged after a clean exit
            error_msg: Error message raised on failure
            pipe_output: Forward child output to our stdout/stderr
            error_cls: Exception class raised on failure
            redact: Secret values replaced with *** wherever argv is logged

        Returns:
            ExecutionResult with buffered output

        Raises:
            CommandError: If the command can not be started or exits non-zero
        """
        argv = [str(arg) for arg in args]
        printable = [REDACTED if arg in redact else arg for arg in argv]
        if before_msg:
            self.logger.info(before_msg)
        self.logger.log_command(printable)

        try:
            process = subprocess.Popen(
                argv,
                cwd=str(self.cwd) if self.cwd else None,
                env=self.env,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as e:
            message = error_msg or f"Unable to run {argv[0]}"
            raise error_cls(message, returncode=127, stderr=str(e)) from e

        stdout, stderr = self._tee(process, pipe_output)
        returncode = process.wait()
        result = ExecutionResult(
            returncode=returncode, stdout=stdout, stderr=stderr, args=argv
        )

        if result.is_failure:
            if NPM_WARNING_MARKER in result.stdout or NPM_WARNING_MARKER in result.stderr:
                self.logger.warning(
                    f"{argv[0]} exited with code {returncode} after npm warnings, continuing"
                )
                if success_msg:
                    self.logger.success(success_msg)
                return result

            message = error_msg or f"Command failed: {' '.join(printable)}"
            raise error_cls(
                message, returncode=returncode, stdout=stdout, stderr=stderr
            )

        if success_msg:
            self.logger.success(success_msg)
        return result

    def _tee(self, process: subprocess.Popen, pipe_output: bool) -> tuple:
        """
        Read both pipes until EOF, forwarding chunks as they arrive.

        Returns:
            Tuple of (stdout, stderr) text
        """
        stdout_fd = process.stdout.fileno()
        stderr_fd = process.stderr.fileno()
        buffers: Dict[int, List[str]] = {stdout_fd: [], stderr_fd: []}
        sel = selectors.DefaultSelector()

        for pipe, target in ((process.stdout, sys.stdout), (process.stderr, sys.stderr)):
            decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
            sel.register(pipe, selectors.EVENT_READ, data=(target, decoder))

        try:
            while sel.get_map():
                for key, _ in sel.select():
                    target, decoder = key.data
                    chunk = os.read(key.fd, READ_CHUNK_SIZE)
                    final = not chunk
                    text = decoder.decode(chunk, final=final)
                    if text:
                        buffers[key.fd].append(text)
                        if pipe_output:
                            target.write(text)
                            target.flush()
                    if final:
                        sel.unregister(key.fileobj)
                        key.fileobj.close()
        finally:
            sel.close()

        return "".join(buffers[stdout_fd]), "".join(buffers[stderr_fd])

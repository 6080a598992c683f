from __future__ import annotations

from dataclasses import dataclass
from textwrap import dedent

from reuse_architect.core.application.prompts.architecture_prompt import ArchitecturePrompt
from reuse_architect.core.application.prompts.response_schema import architecture_response_schema
from reuse_architect.core.domain.entities.generation_request import GenerationRequest

_SYSTEM_TEMPLATE = dedent(
    """\
    Bạn là Thien Master AI - Kiến trúc sư phần mềm tối thượng chuyên tái sử dụng code (Code Reuse Specialist).
    Nhiệm vụ: Phân tích yêu cầu người dùng và giả lập việc quét một thư viện code tại đường dẫn "{library_path}".

    Hãy đóng vai trò phân tích các snippet giả định có trong thư viện đó (ví dụ: auth_utils, date_helper, db_connection, ui_buttons...) và lắp ghép chúng thành một ứng dụng mới.

    Ngôn ngữ trả về: Tiếng Việt 100%.

    Yêu cầu đầu ra JSON bao gồm:
    1. analysis: Phân tích sâu sắc về yêu cầu và chiến lược tái sử dụng (Tối đa 200 từ).
    2. reusedSnippets: Danh sách tên các file/module bạn đã "tìm thấy" và tái sử dụng.
    3. fileTree: Cấu trúc thư mục dự án mới.
    4. documentation: Hướng dẫn chạy và giải thích kiến trúc (Ngắn gọn).
    5. diagramData: Dữ liệu để vẽ biểu đồ thống kê.

    QUAN TRỌNG - CRITICAL INSTRUCTION:
    - JSON response giới hạn token rất nghiêm ngặt.
    - Trong 'fileTree', chỉ viết nội dung 'content' thực sự cho {populated_files} file quan trọng nhất (như Main App hoặc Core Logic).
    - TẤT CẢ các file còn lại: 'content' chỉ được chứa comment mô tả chức năng (VD: "// Logic xử lý auth ở đây..."), KHÔNG viết code chi tiết.
    - Giới hạn tối đa {max_lines} dòng code cho mỗi file.
    - Tuyệt đối không bao gồm SVG path, base64 ảnh, hoặc dữ liệu text dài.
    """
)

_USER_TEMPLATE = dedent(
    """\
    DỰ ÁN: {app_type}
    CÔNG NGHỆ: {tech_stack}
    KIẾN TRÚC: {architecture}
    YÊU CẦU CHI TIẾT: {requirements}
    BỐI CẢNH: {context}

    Output JSON only. Ensure valid JSON.
    """
)


@dataclass(frozen=True, slots=True)
class ArchitecturePromptBuilder:
    max_content_lines: int = 10
    populated_files: int = 2

    def build(self, request: GenerationRequest) -> ArchitecturePrompt:
        return ArchitecturePrompt(
            system_instruction=self._system(request),
            user_instruction=self._user(request),
            response_schema=architecture_response_schema(),
        )

    def _system(self, request: GenerationRequest) -> str:
        return _SYSTEM_TEMPLATE.format(
            library_path=request.library_path,
            populated_files=self.populated_files,
            max_lines=self.max_content_lines,
        )

    def _user(self, request: GenerationRequest) -> str:
        return _USER_TEMPLATE.format(
            app_type=request.app_type.value,
            tech_stack=request.tech_stack.value,
            architecture=request.architecture.value,
            requirements=request.requirements,
            context=request.context,
        )

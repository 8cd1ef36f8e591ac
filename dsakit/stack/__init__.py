"""Stack implementations and problems solved with stacks."""